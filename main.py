"""Fetch the recipes for a fake session and print them."""

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown

import config
from domain.auth import Auth
from domain.errors import DomainError
from domain.fakes import Faker
from domain.models import Recipes
from domain.services import services_from_config


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--format",
        choices=[f.value for f in config.OutputFormat],
        default=None,
        help="How to render the recipes.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=config.LOG_LEVELS,
        default=None,
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> config.Config:
    overrides: dict[str, object] = {}
    if args.format is not None:
        overrides["output_format"] = config.OutputFormat(args.format)
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return config.Config(**overrides)  # pyright: ignore[reportArgumentType]


async def fetch_recipes(cfg: config.Config) -> Recipes:
    faker = Faker(cfg.seed)
    services = services_from_config(cfg, faker=faker)

    # fake example request
    session = Auth.fake(faker, valid_probability=cfg.session_valid_probability)

    return await services.food.get_recipes(session)


def render(recipes: Recipes, cfg: config.Config, console: Console) -> None:
    match cfg.output_format:
        case config.OutputFormat.markdown:
            console.print(Markdown(recipes.markdown))
        case config.OutputFormat.text:
            console.print(str(recipes), markup=False, highlight=False)


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    cfg = load_config(parse_args(argv))
    console = Console() if console is None else console
    logging.basicConfig(
        level=cfg.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True))],
    )

    try:
        recipes = asyncio.run(fetch_recipes(cfg))
    except DomainError as e:
        logger.error("Could not get recipes: %s", e)
        return 1

    render(recipes, cfg, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
