import logging
from typing import Sequence

from domain.ajolt import AsyncJolt
from domain.errors import IngredientLookupFailed, RecipeLookupFailed, UserLookupFailed
from domain.fakes import Faker
from domain.models import Ingredient, Recipe, User


logger = logging.getLogger(__name__)


class IngredientRepository:
    def __init__(
        self,
        *,
        faker: Faker | None = None,
        failure_probability: float = 0.0,
        latency: float = 0,
    ) -> None:
        self.faker = Faker() if faker is None else faker
        self.failure_probability = failure_probability
        self.latency = latency

    async def get(self, id: int) -> Ingredient:
        async with AsyncJolt(self.latency):
            if self.faker.chance(self.failure_probability):
                raise IngredientLookupFailed(id)
            return self.faker.ingredient(id)


class UserRepository:
    """Users, by id. Fabricated on every call."""

    def __init__(
        self,
        *,
        faker: Faker | None = None,
        failure_probability: float = 0.5,
        latency: float = 0,
    ) -> None:
        self.faker = Faker() if faker is None else faker
        self.failure_probability = failure_probability
        self.latency = latency

    async def get(self, id: str) -> User:
        logger.info("Getting user %s", id)
        async with AsyncJolt(self.latency):
            if self.faker.chance(self.failure_probability):
                raise UserLookupFailed(id)
            return self.faker.user(id)


class RecipeRepository:
    """Recipes, by id. One recipe per requested id, in request order."""

    def __init__(
        self,
        *,
        ingredients: IngredientRepository | None = None,
        faker: Faker | None = None,
        failure_probability: float = 0.5,
        latency: float = 0,
    ) -> None:
        self.faker = Faker() if faker is None else faker
        self.ingredients = (
            IngredientRepository(faker=self.faker) if ingredients is None else ingredients
        )
        self.failure_probability = failure_probability
        self.latency = latency

    async def get(self, id: int) -> Recipe:
        ingredients = [
            await self.ingredients.get(i) for i in self.faker.ingredient_ids()
        ]
        return self.faker.recipe(id, ingredients=ingredients)

    async def list(self, ids: Sequence[int]) -> Sequence[Recipe]:
        logger.info("Listing %d recipes", len(ids))
        async with AsyncJolt(self.latency):
            if self.faker.chance(self.failure_probability):
                raise RecipeLookupFailed(ids)
        return [await self.get(id) for id in ids]
