"""Load driver options from a YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from benangmerah_driver.exceptions import ConfigError


def load_options_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML mapping of option names to values."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read options file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in options file {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Options file {path} must contain a mapping")
    return {str(key).replace("-", "_"): value for key, value in raw.items()}
