"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting cannot be used by the persistence or observability layer."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
