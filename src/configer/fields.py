"""
Field annotations understood by the encoders.

Renaming a field uses pydantic's own ``Field(alias=...)``. This module adds
the pieces pydantic does not cover:

* :data:`OmitEmpty`, a marker dropping empty values from encoded output::

      @dataclass
      class Config:
          version: Annotated[str, Field(alias="Version")] = ""
          comment: Annotated[str, OmitEmpty] = ""

* :data:`Duration`, a ``timedelta`` read from and written as compact
  duration strings such as ``"5s"`` or ``"1h30m0s"``.
"""

from __future__ import annotations

__all__ = [
    "Duration",
    "OmitEmpty",
    "format_duration",
    "is_empty",
    "parse_duration",
]

import re
from datetime import timedelta
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


class _OmitEmptyMarker:
    __slots__ = ()

    def __repr__(self) -> str:
        return "OmitEmpty"


OmitEmpty = _OmitEmptyMarker()


def is_empty(value: Any) -> bool:
    """Return whether *value* counts as empty for :data:`OmitEmpty`.

    ``None``, ``False``, numeric zero, zero durations and empty strings or
    containers are empty. Records are never empty.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return value == 0
    if isinstance(value, timedelta):
        return value == timedelta(0)
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


# -----------------------------------------------------------------------------
# Durations
# -----------------------------------------------------------------------------

# unit -> microseconds
_UNIT_US: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # U+00B5
    "μs": Decimal(1),  # U+03BC
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string like ``"300ms"``, ``"1.5h"`` or ``"2h45m"``.

    A duration is an optionally signed sequence of decimal numbers, each with
    an optional fraction and a unit suffix. Valid units are ``ns``, ``us``
    (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. The bare string ``"0"`` is
    accepted as zero. Sub-microsecond precision is truncated.

    Args:
        text: Duration string.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If *text* is not a valid duration.
    """
    s = text.strip()
    sign = 1
    if s[:1] in ("-", "+"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]

    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        m = _PART_RE.match(s, pos)
        if not m:
            raise ValueError(f"invalid duration {text!r}")
        total += Decimal(m.group(1)) * _UNIT_US[m.group(2)]
        pos = m.end()

    return timedelta(microseconds=sign * int(total))


def _frac(value: int, scale: int) -> str:
    whole, rest = divmod(value, scale)
    if not rest:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{str(rest).rjust(width, '0').rstrip('0')}"


def format_duration(td: timedelta) -> str:
    """Format *td* in the compact form read by :func:`parse_duration`.

    Durations under one second use the largest of ``ms`` or ``µs`` that
    fits, e.g. ``"1.5ms"``. Longer durations are written as ``"72h3m0.5s"``
    with leading zero units omitted. Zero is ``"0s"``.
    """
    us = td // timedelta(microseconds=1)
    if us == 0:
        return "0s"

    sign = "-" if us < 0 else ""
    us = abs(us)

    if us < 1_000:
        return f"{sign}{us}µs"
    if us < 1_000_000:
        return f"{sign}{_frac(us, 1_000)}ms"

    hours, rest = divmod(us, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds = _frac(rest, 1_000_000)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _coerce_duration(value: Any) -> Any:
    # ISO 8601 strings ("PT5S") are left to pydantic
    if isinstance(value, str) and not value.lstrip("+-").startswith("P"):
        return parse_duration(value)
    return value


Duration = Annotated[
    timedelta,
    BeforeValidator(_coerce_duration),
    PlainSerializer(format_duration, return_type=str),
]
