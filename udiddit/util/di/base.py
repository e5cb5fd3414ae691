"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory doubles
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Concrete providers (config, domain, application) have no subclasses.
    A mockable component declares ``__mock_component__`` on a base class and
    has one production and one mock subclass, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
