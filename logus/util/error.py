"""Utility layer errors.

Raised while wiring the application (settings, dependency injection),
never while handling a request.
"""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the target environment."""


class DependencyInjectionError(UtilError):
    """A provider implementation could not be selected."""
