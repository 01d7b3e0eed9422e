import functools
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse
from starlette.routing import Route

import config
from domain.auth import Auth, Authed
from domain.errors import RepositoryError, SessionInvalid
from domain.fakes import Faker
from domain.services import Services, services_from_config


logger = logging.getLogger(__name__)


CONFIG = config.Config()


def templates_factory(html_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(html_dir),
        autoescape=select_autoescape(),
    )


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


async def health(request: Request) -> PlainTextResponse:
    return PlainTextResponse("ok")


@aHTMLResponse
async def homepage(request: Request) -> str:
    services: Services = request.app.state.services
    templates: Environment = request.app.state.templates
    session: Authed = request.app.state.session_factory()
    recipes = await services.food.get_recipes(session)
    return templates.get_template("recipes.html").render(
        recipes=[
            {"name": recipe.name, "content": Markup(recipe.html)} for recipe in recipes
        ]
    )


@aHTMLResponse
async def session_invalid(request: Request, exc: Exception) -> tuple[str, int]:
    logger.info("Rejected request: %s", exc)
    templates: Environment = request.app.state.templates
    return templates.get_template("error.html").render(message=str(exc)), 401


@aHTMLResponse
async def repository_error(request: Request, exc: Exception) -> tuple[str, int]:
    logger.warning("Lookup failed: %s", exc)
    templates: Environment = request.app.state.templates
    return templates.get_template("error.html").render(message=str(exc)), 502


def create_app(cfg: config.Config | None = None) -> Starlette:
    cfg = CONFIG if cfg is None else cfg
    faker = Faker(cfg.seed)

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/health", health),
        ],
        exception_handlers={
            SessionInvalid: session_invalid,
            RepositoryError: repository_error,
        },
    )

    app.state.templates = templates_factory(cfg.html_dir)
    app.state.services = services_from_config(cfg, faker=faker)
    app.state.session_factory = functools.partial(
        Auth.fake, faker, valid_probability=cfg.session_valid_probability
    )
    return app


app = create_app()
