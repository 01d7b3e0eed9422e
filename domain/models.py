from dataclasses import asdict, dataclass
from typing import Any, Iterable, Iterator, TypeAlias, overload

import markdown2  # pyright: ignore[reportMissingTypeStubs]


@dataclass(frozen=True)
class Time:
    hrs: int
    mins: int

    def __str__(self) -> str:
        return f"{self.hrs}:{self.mins:02d}"


@dataclass(frozen=True)
class Weight:
    """Grams."""

    grams: int

    def __str__(self) -> str:
        return f"{self.grams}g"


@dataclass(frozen=True)
class Portion:
    count: float

    def __str__(self) -> str:
        return f"{self.count:g}"


@dataclass(frozen=True)
class Amount:
    count: int

    def __post_init__(self) -> None:
        if not 0 <= self.count <= 255:
            raise ValueError(f"Amount out of range: {self.count}")

    def __str__(self) -> str:
        return str(self.count)


Quantity: TypeAlias = Weight | Portion | Amount


@dataclass(frozen=True)
class Ingredient:
    id: int
    name: str


@dataclass(frozen=True)
class RecipeIngredient:
    ingredient: Ingredient
    quantity: Quantity

    def __str__(self) -> str:
        return f"{self.quantity} x {self.ingredient.name}"


@dataclass(frozen=True)
class Recipe:
    id: int
    name: str
    prep_time: Time
    cook_time: Time
    ingredients: tuple[RecipeIngredient, ...]
    method: str

    def __str__(self) -> str:
        ingredients_list = "".join(f"- {i}\n" for i in self.ingredients)
        return (
            f"Recipe: {self.name}\n"
            "\n"
            f"    prep time - {self.prep_time}\n"
            f"    cook time - {self.cook_time}\n"
            "\n"
            "ingredients:\n"
            f"{ingredients_list}"
            "\n"
            "\n"
            "method:\n"
            f"    {self.method}"
        )

    @property
    def markdown(self) -> str:
        ingredients_list = "".join(f"- {i}\n" for i in self.ingredients)
        return (
            f"### {self.name}\n"
            "\n"
            f"⏰Preparation time: {self.prep_time}\n"
            "\n"
            f"🔥Cooking time: {self.cook_time}\n"
            "\n"
            "#### Ingredients\n"
            "\n"
            f"{ingredients_list}"
            "\n"
            "#### Method\n"
            "\n"
            f"{self.method}\n"
        )

    @property
    def html(self) -> str:
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.markdown
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class User:
    id: str
    name: str
    recipes: tuple[int, ...]


class Recipes:
    """The recipes returned for one request, in repository order."""

    def __init__(self, recipes: Iterable[Recipe]) -> None:
        self._recipes = tuple(recipes)

    def __repr__(self) -> str:
        return f"<Recipes(n={len(self)})>"

    def __str__(self) -> str:
        return "".join(f"{recipe}\n\n" for recipe in self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    @overload
    def __getitem__(self, idx: int) -> Recipe: ...

    @overload
    def __getitem__(self, idx: slice) -> tuple[Recipe, ...]: ...

    def __getitem__(self, idx: int | slice) -> Recipe | tuple[Recipe, ...]:
        return self._recipes[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipes):
            return NotImplemented
        return self._recipes == other._recipes

    @property
    def markdown(self) -> str:
        return "\n".join(recipe.markdown for recipe in self._recipes)

    @property
    def html(self) -> str:
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.markdown
        )
