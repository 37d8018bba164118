"""Small text and file helpers shared across the package."""

from __future__ import annotations

import re

MAX_STRING = 51
MAX_LINE = 256
ID_DIGITOS = 6

_C_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def trim_string(text: str | None) -> str | None:
    """Strip ASCII whitespace from both ends of ``text``."""
    if text is None:
        return None
    return text.strip(_C_WHITESPACE)


def string_para_int(text: str | None) -> int:
    """Parse a leading integer the way ``atoi`` does; 0 when there is none."""
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def string_para_bool(text: str | None) -> bool:
    """Return True only for the exact strings ``"true"`` and ``"1"``."""
    return text is not None and text in ("true", "1")


def formatar_id(id: int) -> str:
    """Format an identifier as six zero-padded digits, truncated to six characters."""
    return f"{id:06d}"[:ID_DIGITOS]


def arquivo_existe(path) -> bool:
    """Tell whether ``path`` can be opened for reading."""
    try:
        with open(path, "r", encoding="utf-8"):
            return True
    except OSError:
        return False