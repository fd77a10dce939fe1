"""Pydantic v2 settings read by the CLI harness."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class HarnessSettings(BaseModel):
    """The subset of merged options the harness itself acts on.

    Every merged option, including these, is also handed to the driver.
    """

    model_config = ConfigDict(extra="ignore")

    output_file: Path | None = None
    force: bool = False
    format: str = "turtle"
    log_level: str = "INFO"
    last_fetched: str = ""

    @field_validator("output_file", mode="before")
    @classmethod
    def _blank_is_none(cls, value: object) -> object:
        if value in ("", False):
            return None
        return value

    @field_validator("last_fetched", mode="before")
    @classmethod
    def _stringify_timestamp(cls, value: object) -> object:
        if value is None:
            return ""
        if not isinstance(value, str):
            # YAML parses unquoted timestamps into datetime objects
            return value.isoformat() if hasattr(value, "isoformat") else str(value)
        return value
