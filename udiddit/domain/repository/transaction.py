"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Scopes a unit of work across all repositories.

    ``begin()`` returns an async context manager: leaving it normally commits,
    leaving it with an exception rolls every repository back and re-raises.
    """

    @abstractmethod
    def begin(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction covering every repository of the scope."""
        pass
