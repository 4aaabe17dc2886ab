"""Utility layer errors."""

from typing import Optional


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """The process is missing configuration it cannot run without.

    ``setting`` names the environment variable to fix, when known. Not
    retriable.
    """

    def __init__(self, message: str, setting: Optional[str] = None) -> None:
        super().__init__(message)
        self.setting = setting


class DependencyInjectionError(UtilError):
    """No provider implementation for a requested component."""

    pass
