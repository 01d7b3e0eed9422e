from typing import Iterable


class DomainError(Exception):
    """Anything the use cases can fail with."""


class SessionInvalid(DomainError):
    def __init__(self, message: str = "session is not valid") -> None:
        super().__init__(message)


class RepositoryError(DomainError):
    pass


class UserLookupFailed(RepositoryError):
    def __init__(self, user_id: str) -> None:
        super().__init__("oh user")
        self.user_id = user_id


class RecipeLookupFailed(RepositoryError):
    def __init__(self, recipe_ids: Iterable[int]) -> None:
        super().__init__("oh recipe")
        self.recipe_ids = tuple(recipe_ids)


class IngredientLookupFailed(RepositoryError):
    def __init__(self, ingredient_id: int) -> None:
        super().__init__("oh ingredient")
        self.ingredient_id = ingredient_id
