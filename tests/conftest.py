import pytest

from domain.fakes import Faker
from domain.models import (
    Amount,
    Ingredient,
    Portion,
    Recipe,
    RecipeIngredient,
    Time,
    User,
    Weight,
)


@pytest.fixture
def faker() -> Faker:
    return Faker(seed=1234)


@pytest.fixture
def pancakes() -> Recipe:
    return Recipe(
        id=1,
        name="pancakes",
        prep_time=Time(hrs=0, mins=10),
        cook_time=Time(hrs=1, mins=5),
        ingredients=(
            RecipeIngredient(
                ingredient=Ingredient(id=10, name="flour"), quantity=Weight(grams=200)
            ),
            RecipeIngredient(
                ingredient=Ingredient(id=11, name="milk"), quantity=Portion(count=0.5)
            ),
            RecipeIngredient(
                ingredient=Ingredient(id=12, name="eggs"), quantity=Amount(count=2)
            ),
        ),
        method="Whisk it all together and fry.",
    )


@pytest.fixture
def user() -> User:
    return User(id="123", name="Ada", recipes=(1, 2, 3))
