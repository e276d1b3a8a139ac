"""Explicit numeric parse step for free-text scenario fields.

Form values arrive as strings, numbers or nothing at all. Anything that is
not a finite number is replaced by ``0``, but the replacement is tagged so
callers can still tell "user entered 0" apart from "input missing".
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TypeAlias

LOGGER = logging.getLogger(__name__)

__all__ = [
    "Defaulted",
    "ParsedNumber",
    "Valid",
    "parse_flag",
    "parse_number",
    "parse_text",
]


@dataclass(frozen=True, slots=True)
class Valid:
    """A scalar that parsed to a finite number."""

    value: float

    @property
    def defaulted(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Defaulted:
    """A missing or non-numeric scalar, substituted with zero."""

    raw: object = None

    @property
    def value(self) -> float:
        return 0.0

    @property
    def defaulted(self) -> bool:
        return True


ParsedNumber: TypeAlias = Valid | Defaulted


def parse_number(raw: object, *, field: str | None = None) -> ParsedNumber:
    """Parse ``raw`` into a :class:`Valid` number or a zero :class:`Defaulted`.

    Args:
        raw: Value as supplied by a form or scenario file.
        field: Optional field name used in debug logging.

    Returns:
        ``Valid(n)`` for finite ints, floats and numeric strings, otherwise
        ``Defaulted(raw)``. Booleans are not numbers here.
    """

    value: float | None = None
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            value = None
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            value = None

    if value is None or not math.isfinite(value):
        if raw not in (None, ""):
            LOGGER.debug(
                "Non-numeric input defaulted to zero",
                extra={"field": field, "raw": repr(raw)},
            )
        return Defaulted(raw)
    return Valid(value)


def parse_text(raw: object) -> str | None:
    """Return a stripped string, or ``None`` for blank or non-string input."""

    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def parse_flag(raw: object) -> bool:
    """Interpret yes/no style form answers."""

    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return raw != 0
    if isinstance(raw, str):
        return raw.strip().lower() in {"1", "true", "yes", "ja", "y", "on"}
    return False
