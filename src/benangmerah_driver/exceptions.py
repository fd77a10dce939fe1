"""Exception types shared by drivers and the CLI harness."""

from __future__ import annotations


class DriverError(Exception):
    """Base class for all errors raised by this package."""


class DriverStateError(DriverError):
    """An event was emitted after the driver reached a terminal state."""


class OutputExistsError(DriverError):
    """The output file already exists and overwriting was not forced."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} already exists. Use --force to override.")
        self.path = path


class OutputFormatError(DriverError):
    """No RDF serializer is registered for the requested format."""


class ConfigError(DriverError):
    """An options file could not be read or is not a mapping."""
