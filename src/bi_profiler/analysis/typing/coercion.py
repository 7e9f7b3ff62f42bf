"""Scalar coercion with parse-or-discard semantics.

Row values are arbitrary scalars (None, bool, int, float, str, date, datetime).
The helpers here answer "is this a null", "what number is this" and "what
timestamp is this"; a value that cannot be coerced yields None and is simply
left out of the computation that asked.
"""

from __future__ import annotations

import math
import numbers
import re
from datetime import UTC, date, datetime, time
from typing import Any

from bi_profiler.analysis.typing.patterns import PatternConfig, get_pattern_config

type Scalar = None | bool | int | float | str | date | datetime

# Decimal or exponent float literal; no underscores, no inf/nan words
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def is_null(value: Any) -> bool:
    """Check whether a value counts as missing.

    None, the empty string and float NaN are nulls.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def non_null(values: list[Any]) -> list[Any]:
    """Drop null entries, preserving order."""
    return [v for v in values if not is_null(v)]


def to_number(value: Any) -> float | None:
    """Coerce a value to a finite float.

    Booleans are not numbers. Strings must be a plain numeric literal
    (surrounding whitespace allowed).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def to_timestamp(value: Any, pattern_config: PatternConfig | None = None) -> datetime | None:
    """Coerce a value to a UTC-aware timestamp.

    datetime and date instances are accepted as-is; strings must match one of
    the configured date patterns. Numbers and booleans are never timestamps.
    Naive values are taken to be UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        config = pattern_config or get_pattern_config()
        parsed_str = config.parse_datetime(value.strip())
        if parsed_str is None:
            return None
        parsed = parsed_str
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def to_string_form(value: Any) -> str:
    """Render a value the way it reads in a spreadsheet cell.

    Booleans become "true"/"false" and integral floats drop the ".0".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def distinct_key(value: Any) -> tuple[bool, Any]:
    """Equality key for distinct counting.

    Python treats True == 1, so booleans are tagged to keep them apart from
    numbers while 1 and 1.0 still compare equal.
    """
    return (isinstance(value, bool), value)
