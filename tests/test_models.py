import dataclasses

import pytest

from domain.models import (
    Amount,
    Ingredient,
    Portion,
    Recipe,
    RecipeIngredient,
    Recipes,
    Time,
    User,
    Weight,
)


@pytest.mark.parametrize(
    "quantity,expected",
    (
        (Weight(grams=250), "250g"),
        (Portion(count=0.5), "0.5"),
        (Portion(count=2.0), "2"),
        (Amount(count=3), "3"),
    ),
)
def test_quantity_str(quantity: Weight | Portion | Amount, expected: str) -> None:
    assert str(quantity) == expected


def test_amount_out_of_range() -> None:
    with pytest.raises(ValueError):
        Amount(count=256)


def test_time_str() -> None:
    assert str(Time(hrs=1, mins=5)) == "1:05"
    assert str(Time(hrs=0, mins=45)) == "0:45"


def test_recipe_ingredient_str() -> None:
    line = RecipeIngredient(
        ingredient=Ingredient(id=1, name="butter"), quantity=Weight(grams=50)
    )
    assert str(line) == "50g x butter"


def test_recipe_str(pancakes: Recipe) -> None:
    expected = (
        "Recipe: pancakes\n"
        "\n"
        "    prep time - 0:10\n"
        "    cook time - 1:05\n"
        "\n"
        "ingredients:\n"
        "- 200g x flour\n"
        "- 0.5 x milk\n"
        "- 2 x eggs\n"
        "\n"
        "\n"
        "method:\n"
        "    Whisk it all together and fry."
    )
    assert str(pancakes) == expected


@pytest.mark.parametrize(
    "name,method",
    (
        ("", ""),
        ("{name}", "{method} %s %d"),
        ("<b>bold</b>", "line one\nline two"),
        ("ünïcödé 🍴", "\ttabbed"),
    ),
)
def test_recipe_renders_whatever_the_contents(name: str, method: str) -> None:
    recipe = Recipe(
        id=0,
        name=name,
        prep_time=Time(hrs=0, mins=0),
        cook_time=Time(hrs=0, mins=0),
        ingredients=(),
        method=method,
    )
    text = str(recipe)
    assert "ingredients:\n\n\nmethod:" in text
    assert isinstance(recipe.markdown, str)
    assert isinstance(recipe.html, str)


def test_recipe_html(pancakes: Recipe) -> None:
    html = pancakes.html
    assert "<h3>pancakes</h3>" in html
    assert "<li>200g x flour</li>" in html


def test_recipe_to_dict(pancakes: Recipe) -> None:
    got = pancakes.to_dict()
    assert got["name"] == "pancakes"
    assert got["prep_time"] == {"hrs": 0, "mins": 10}
    assert len(got["ingredients"]) == 3


def test_user_is_immutable(user: User) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Bea"  # pyright: ignore[reportAttributeAccessIssue]


def test_recipes(pancakes: Recipe) -> None:
    recipes = Recipes([pancakes, pancakes])
    assert len(recipes) == 2
    assert recipes[0] is pancakes
    assert list(recipes) == [pancakes, pancakes]
    assert str(recipes) == f"{pancakes}\n\n{pancakes}\n\n"
    assert recipes.html.count("<h3>pancakes</h3>") == 2


def test_recipes_empty() -> None:
    recipes = Recipes([])
    assert len(recipes) == 0
    assert str(recipes) == ""
    assert recipes == Recipes(())


def test_recipe_str_leaves_two_blank_lines_before_method(pancakes: Recipe) -> None:
    assert "- 2 x eggs\n\n\nmethod:\n" in str(pancakes)
