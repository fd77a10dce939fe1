"""Parse pass-through command-line arguments into driver options.

Follows minimist conventions, so flags behave as they do for the Node.js
BenangMerah drivers:

* ``--key=value`` and ``--key value`` set ``key``
* ``--flag`` alone sets ``flag`` to ``True``; ``--no-flag`` sets it to ``False``
* ``-abc`` sets ``a``, ``b`` and ``c`` to ``True``; ``-n 5`` and ``-n5`` set ``n`` to ``5``
* everything after ``--`` is positional
* numeric values become ``int``/``float``; ``true``/``false`` become bools
* repeating a key collects its values into a list

Hyphens in option names become underscores (``--base-uri`` → ``base_uri``).
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

_INT_RE = re.compile(r"^[-+]?\d+$")
_FLOAT_RE = re.compile(r"^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$")


def coerce_value(raw: str) -> Any:
    if raw == "true":
        return True
    if raw == "false":
        return False
    if _INT_RE.match(raw):
        return int(raw)
    if _FLOAT_RE.match(raw):
        return float(raw)
    return raw


def _is_flag(arg: str) -> bool:
    return arg.startswith("-") and len(arg) > 1 and not _FLOAT_RE.match(arg)


def _set(options: dict[str, Any], key: str, value: Any) -> None:
    key = key.replace("-", "_")
    if key not in options:
        options[key] = value
    elif isinstance(options[key], list):
        options[key].append(value)
    else:
        options[key] = [options[key], value]


def _set_short_flags(options: dict[str, Any], letters: str) -> bool:
    """Set all but the last letter of a ``-abc`` group to ``True``.

    Returns ``True`` when a numeric tail (``-n5``) was assigned to the letter
    before it, leaving nothing for the caller to set.
    """
    for j, letter in enumerate(letters[:-1]):
        rest = letters[j + 1 :]
        if _FLOAT_RE.match(rest):
            _set(options, letter, coerce_value(rest))
            return True
        _set(options, letter, True)
    return False


def parse_cli_args(args: Sequence[str]) -> tuple[list[str], dict[str, Any]]:
    """Split *args* into positional arguments and an options mapping."""
    positionals: list[str] = []
    options: dict[str, Any] = {}
    i = 0
    while i < len(args):
        arg = args[i]
        has_value = i + 1 < len(args) and not _is_flag(args[i + 1]) and args[i + 1] != "--"

        if arg == "--":
            positionals.extend(args[i + 1 :])
            break
        if arg.startswith("--") and len(arg) > 2:
            body = arg[2:]
            if "=" in body:
                key, raw = body.split("=", 1)
                _set(options, key, coerce_value(raw))
            elif body.startswith("no-"):
                _set(options, body[3:], False)
            elif has_value:
                _set(options, body, coerce_value(args[i + 1]))
                i += 1
            else:
                _set(options, body, True)
        elif _is_flag(arg):
            if _set_short_flags(options, arg[1:]):
                i += 1
                continue
            if has_value:
                _set(options, arg[-1], coerce_value(args[i + 1]))
                i += 1
            else:
                _set(options, arg[-1], True)
        else:
            positionals.append(arg)
        i += 1
    return positionals, options
