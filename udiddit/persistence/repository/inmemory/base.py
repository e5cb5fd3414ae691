"""Shared behaviour of the in-memory repositories."""

from itertools import count
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import IntegrityError

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Row storage with SERIAL-like ids and snapshot/restore for rollback.

    There are no foreign-key actions: deleting a row never touches rows that
    reference it.
    """

    def __init__(self) -> None:
        self._rows: dict[int, T] = {}
        self._ids = count(1)

    def _next_id(self) -> int:
        return next(self._ids)

    def snapshot(self) -> Any:
        """Capture the current rows and id sequence."""
        return dict(self._rows), self._ids

    def restore(self, state: Any) -> None:
        """Put back a state captured by ``snapshot``.

        Like a database sequence, the id counter is not rewound.
        """
        rows, _ = state
        self._rows = dict(rows)


def violation(constraint: str, detail: str) -> IntegrityError:
    """Build the IntegrityError a database would raise for a constraint."""
    return IntegrityError(
        f"INSERT/UPDATE violates {constraint}",
        None,
        Exception(f'violates constraint "{constraint}": {detail}'),
    )
