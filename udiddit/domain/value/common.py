"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable record compared by value, such as a migration rejection."""

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Validated wrapper around one primitive, e.g. ``Username("alice")``.

    ``.root`` holds the primitive and ``model_dump()`` returns it unwrapped,
    so wrapped names go straight into insert dicts.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
