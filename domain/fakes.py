"""Fabricates domain records. Stands in for the store behind the repositories."""

import faker

from domain.models import (
    Amount,
    Ingredient,
    Portion,
    Quantity,
    Recipe,
    RecipeIngredient,
    Time,
    User,
    Weight,
)


MAX_USER_RECIPES = 4
MAX_RECIPE_INGREDIENTS = 2
MAX_METHOD_SENTENCES = 3


class Faker:
    """Builds domain records out of `faker` data. Seeded instances agree."""

    def __init__(self, seed: int | None = None) -> None:
        self.fake = faker.Faker()
        self.fake.seed_instance(seed)

    def chance(self, probability: float) -> bool:
        """True with the given probability, to the nearest percent."""
        return self.fake.pybool(truth_probability=round(probability * 100))

    def token(self) -> str:
        return self.fake.hexify(text="^" * 32)

    def word(self) -> str:
        return self.fake.word()

    def first_name(self) -> str:
        return self.fake.first_name()

    def paragraph(self) -> str:
        return self.fake.paragraph(
            nb_sentences=self.fake.random_int(1, MAX_METHOD_SENTENCES),
            variable_nb_sentences=False,
        )

    def time(self) -> Time:
        return Time(hrs=self.fake.random_int(0, 3), mins=self.fake.random_int(0, 59))

    def quantity(self) -> Quantity:
        match self.fake.random_int(0, 2):
            case 0:
                return Weight(grams=self.fake.random_int(1, 1000))
            case 1:
                return Portion(count=self.fake.random_int(25, 400) / 100)
            case _:
                return Amount(count=self.fake.random_int(0, 255))

    def ingredient(self, id: int | None = None) -> Ingredient:
        id = self.fake.random_int(1, 10_000) if id is None else id
        return Ingredient(id=id, name=self.word())

    def recipe_ingredient(self, ingredient: Ingredient | None = None) -> RecipeIngredient:
        ingredient = self.ingredient() if ingredient is None else ingredient
        return RecipeIngredient(ingredient=ingredient, quantity=self.quantity())

    def ingredient_ids(self) -> list[int]:
        n = self.fake.random_int(1, MAX_RECIPE_INGREDIENTS)
        return [self.fake.random_int(1, 10_000) for _ in range(n)]

    def recipe(
        self,
        id: int,
        *,
        ingredients: list[Ingredient] | None = None,
    ) -> Recipe:
        if ingredients is None:
            ingredients = [self.ingredient(i) for i in self.ingredient_ids()]
        return Recipe(
            id=id,
            name=self.word(),
            prep_time=self.time(),
            cook_time=self.time(),
            ingredients=tuple(self.recipe_ingredient(i) for i in ingredients),
            method=self.paragraph(),
        )

    def user(self, id: str | None = None) -> User:
        id = self.token() if id is None else id
        n = self.fake.random_int(0, MAX_USER_RECIPES)
        return User(
            id=id,
            name=self.first_name(),
            recipes=tuple(self.fake.random_int(1, 10_000) for _ in range(n)),
        )
