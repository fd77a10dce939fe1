"""Run one driver standalone and serialize what it emits."""

from __future__ import annotations

import asyncio
import importlib
import inspect
import logging
import sys
from collections.abc import Awaitable, Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from benangmerah_driver.config import HarnessSettings, load_options_file
from benangmerah_driver.driver import DriverBase
from benangmerah_driver.events import EventKind
from benangmerah_driver.exceptions import (
    ConfigError,
    OutputExistsError,
    OutputFormatError,
)
from benangmerah_driver.harness.listener import HarnessListener
from benangmerah_driver.rdf import TripleWriter
from benangmerah_driver.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def import_driver(driver_path: str) -> type[DriverBase]:
    """Import a driver class from a ``"module.path:ClassName"`` string.

    Raises:
        ValueError: If the format is invalid, the import fails or the
            attribute is not a :class:`DriverBase` subclass.
    """
    if ":" not in driver_path:
        raise ValueError(
            f"Invalid driver path '{driver_path}'. "
            "Expected format: 'module.path:ClassName'"
        )
    module_path, class_name = driver_path.rsplit(":", 1)
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ValueError(f"Could not import module '{module_path}': {exc}") from exc
    driver_cls = getattr(module, class_name, None)
    if not (isinstance(driver_cls, type) and issubclass(driver_cls, DriverBase)):
        raise ValueError(f"'{driver_path}' is not a DriverBase subclass")
    return driver_cls


def _make_sink(output_file: Path | None) -> Callable[[str], None]:
    if output_file is None:

        def write_stdout(data: str) -> None:
            sys.stdout.write(data)
            sys.stdout.flush()

        return write_stdout

    def write_file(data: str) -> None:
        output_file.write_text(data, encoding="utf-8")

    return write_file


async def _wait(awaitable: Awaitable[Any]) -> None:
    await awaitable


def run_driver(
    driver_cls: type[DriverBase],
    options: Mapping[str, Any] | None = None,
    positionals: Sequence[str] = (),
    cli_options: Mapping[str, Any] | None = None,
    config_path: Path | str | None = None,
) -> int:
    """Instantiate, configure and fetch *driver_cls*; return an exit code.

    Option layers, lowest precedence first: the driver's defaults,
    *options*, the YAML file at *config_path*, then *cli_options*. The
    output goes to ``output_file``, else the first positional argument,
    else standard output.
    """
    merged: dict[str, Any] = dict(options or {})
    if config_path:
        try:
            merged.update(load_options_file(config_path))
        except ConfigError as exc:
            setup_logging(str(merged.get("log_level", "INFO")))
            logger.error("%s", exc)
            return 1
    merged.update(cli_options or {})
    if not merged.get("output_file") and positionals:
        merged["output_file"] = positionals[0]

    setup_logging(str(merged.get("log_level", "INFO")))
    try:
        settings = HarnessSettings.model_validate(merged)
    except ValidationError as exc:
        logger.error("Invalid harness options: %s", exc)
        return 1

    output_file = settings.output_file
    if output_file is not None and output_file.exists() and not settings.force:
        logger.error("%s", OutputExistsError(str(output_file)))
        return 1

    try:
        writer = TripleWriter(format=settings.format)
    except OutputFormatError as exc:
        logger.error("%s", exc)
        return 1

    driver = driver_cls()
    driver.set_options(merged)
    if settings.last_fetched:
        driver.set_last_fetched(settings.last_fetched)

    listener = HarnessListener(driver, writer, _make_sink(output_file))
    listener.attach()

    logger.info(
        "Fetching with %s into %s", driver.name, output_file or "standard output"
    )
    try:
        result = driver.fetch()
        if inspect.isawaitable(result):
            asyncio.run(_wait(result))
    except Exception:
        logger.exception("%s raised during fetch", driver.name)
        raise
    finally:
        listener.detach()

    if listener.outcome is None:
        logger.warning("%s returned without finishing, nothing written", driver.name)
        return 1
    return 0 if listener.outcome is EventKind.FINISH else 1
