import logging

from config import Config
from domain.auth import Authed
from domain.errors import SessionInvalid
from domain.fakes import Faker
from domain.models import Recipes
from domain.repository import IngredientRepository, RecipeRepository, UserRepository


logger = logging.getLogger(__name__)


async def get_recipes(
    auth: Authed,
    *,
    users: UserRepository,
    recipes: RecipeRepository,
) -> Recipes:
    """All the recipes owned by the session's user.

    The user lookup and the recipe lookup run one after the other and the
    first failure propagates as is.
    """
    if not auth.is_valid():
        raise SessionInvalid()

    user = await users.get(auth.id())
    logger.info("User %s owns %d recipes", user.id, len(user.recipes))
    found = await recipes.list(user.recipes)
    return Recipes(found)


class FoodService:
    def __init__(
        self,
        *,
        users: UserRepository | None = None,
        recipes: RecipeRepository | None = None,
    ) -> None:
        self.users = UserRepository() if users is None else users
        self.recipes = RecipeRepository() if recipes is None else recipes

    async def get_recipes(self, auth: Authed) -> Recipes:
        return await get_recipes(auth, users=self.users, recipes=self.recipes)


class Services:
    def __init__(self, users: UserRepository, recipes: RecipeRepository) -> None:
        self.food = FoodService(users=users, recipes=recipes)


def services_from_config(config: Config, *, faker: Faker | None = None) -> Services:
    faker = Faker(config.seed) if faker is None else faker
    ingredients = IngredientRepository(
        faker=faker,
        failure_probability=config.ingredient_failure_probability,
        latency=config.latency,
    )
    users = UserRepository(
        faker=faker,
        failure_probability=config.user_failure_probability,
        latency=config.latency,
    )
    recipes = RecipeRepository(
        ingredients=ingredients,
        faker=faker,
        failure_probability=config.recipe_failure_probability,
        latency=config.latency,
    )
    return Services(users, recipes)
