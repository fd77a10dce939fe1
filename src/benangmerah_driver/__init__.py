"""Base API for BenangMerah drivers: sources of linked data for BenangMerah."""

from benangmerah_driver.driver import DriverBase, DriverState
from benangmerah_driver.events import EventKind, Listenable, LogLevel, Observable, Triple
from benangmerah_driver.exceptions import (
    ConfigError,
    DriverError,
    DriverStateError,
    OutputExistsError,
    OutputFormatError,
)
from benangmerah_driver.options import merge_options

__version__ = "0.3.0"

__all__ = [
    "ConfigError",
    "DriverBase",
    "DriverError",
    "DriverState",
    "DriverStateError",
    "EventKind",
    "Listenable",
    "LogLevel",
    "Observable",
    "OutputExistsError",
    "OutputFormatError",
    "Triple",
    "merge_options",
]
