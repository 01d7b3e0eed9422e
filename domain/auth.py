import logging
from dataclasses import dataclass
from typing import Protocol, Self

from domain.fakes import Faker


logger = logging.getLogger(__name__)


DEFAULT_VALID_PROBABILITY = 0.8


class Authed(Protocol):
    def is_valid(self) -> bool: ...

    def id(self) -> str: ...


@dataclass(frozen=True)
class Session:
    jwt: str
    valid: bool


class Auth:
    """A session plus the user it belongs to. Nothing verifies the token."""

    @classmethod
    def fake(
        cls,
        faker: Faker | None = None,
        *,
        valid_probability: float = DEFAULT_VALID_PROBABILITY,
    ) -> Self:
        faker = Faker() if faker is None else faker
        session = Session(jwt=faker.token(), valid=faker.chance(valid_probability))
        return cls(session=session, user_id=faker.token())

    def __init__(self, *, session: Session, user_id: str) -> None:
        self.session = session
        self.user_id = user_id

    def __repr__(self) -> str:
        return f"<Auth(user_id={self.user_id}, valid={self.session.valid})>"

    def is_valid(self) -> bool:
        logger.debug("jwt: %s", self.session.jwt)
        return self.session.valid

    def id(self) -> str:
        return self.user_id
