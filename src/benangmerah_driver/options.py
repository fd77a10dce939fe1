"""Merging caller-supplied options over a driver's declared defaults."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_options(
    new_options: Mapping[str, Any] | None, defaults: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a new dict of *defaults* overridden by *new_options*.

    Keys present only on one side pass through unchanged. Neither argument
    is modified.
    """
    merged = dict(defaults)
    if new_options:
        merged.update(new_options)
    return merged
