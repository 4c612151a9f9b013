"""Errors raised while preparing the server configuration."""

from __future__ import annotations


class EntrypointError(RuntimeError):
    """Base class for fatal entrypoint failures."""


class MissingVariableError(EntrypointError):
    """A mandatory environment variable is unset or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Error: Environment variable {name} is not set.")
        self.name = name


class InvalidPortError(EntrypointError):
    """The HTTP port is not a plain decimal number."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Error: {name} must be a number.")
        self.name = name
        self.value = value


class UnsupportedDriverError(EntrypointError):
    """No connection-string format is known for the driver."""

    def __init__(self, driver: str) -> None:
        super().__init__(f"Unsupported database driver: {driver}")
        self.driver = driver


__all__ = ["EntrypointError", "InvalidPortError", "MissingVariableError", "UnsupportedDriverError"]
