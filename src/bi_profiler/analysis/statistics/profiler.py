"""Column statistics calculator.

Computes counts, uniqueness and mode for every column, numeric summaries for
numeric columns and the timestamp range for temporal columns. Values that do
not coerce to the column's type are left out of the typed summaries; nothing
here raises on bad data.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from datetime import datetime
from typing import Any

import numpy as np

from bi_profiler.analysis.statistics.models import ColumnStats
from bi_profiler.analysis.typing.coercion import distinct_key, non_null, to_number, to_timestamp
from bi_profiler.analysis.typing.patterns import PatternConfig
from bi_profiler.core.models.base import ColumnType


def compute_column_stats(
    values: Sequence[Any],
    column_type: ColumnType,
    pattern_config: PatternConfig | None = None,
) -> ColumnStats:
    """Compute descriptive statistics for a column.

    Args:
        values: Raw column values, nulls included
        column_type: The column's inferred type
        pattern_config: Date patterns for temporal coercion

    Returns:
        ColumnStats for the column
    """
    all_values = list(values)
    present = non_null(all_values)

    fields: dict[str, Any] = {
        "count": len(all_values),
        "null_count": len(all_values) - len(present),
        "unique_count": len({distinct_key(v) for v in present}),
    }

    if column_type == ColumnType.NUMERIC:
        fields.update(_numeric_summary(present))
    elif column_type == ColumnType.TEMPORAL:
        fields.update(_temporal_range(present, pattern_config))

    if present:
        fields["mode"] = compute_mode(present)

    return ColumnStats(**fields)


def _numeric_summary(values: list[Any]) -> dict[str, float]:
    """min/max/mean/median/population std dev over the values that parse."""
    numbers = [n for n in (to_number(v) for v in values) if n is not None]
    if not numbers:
        return {}

    arr = np.sort(np.asarray(numbers, dtype=np.float64))
    low, high = float(arr[0]), float(arr[-1])

    with np.errstate(over="ignore", under="ignore", invalid="ignore"):
        mean = float(arr.mean())
        std_dev = float(arr.std(ddof=0))
    if not (math.isfinite(mean) and math.isfinite(std_dev)) or (std_dev == 0.0 and high > low):
        # Sums overflowed or squared deviations underflowed; redo on a unit scale
        scale = float(np.abs(arr).max())
        unit = arr / scale
        mean = float(unit.mean()) * scale
        std_dev = float(unit.std(ddof=0)) * scale

    return {
        "min": low,
        "max": high,
        "mean": min(max(mean, low), high),
        "median": _median(arr),
        "std_dev": std_dev,
    }


def _median(sorted_values: np.ndarray) -> float:
    """Middle element, or the average of the two middle elements."""
    mid = len(sorted_values) // 2
    if len(sorted_values) % 2:
        return float(sorted_values[mid])
    # Halve before adding so values near the float64 limit do not overflow
    return float(sorted_values[mid - 1] / 2 + sorted_values[mid] / 2)


def _temporal_range(
    values: list[Any], pattern_config: PatternConfig | None
) -> dict[str, datetime]:
    """Earliest and latest timestamp over the values that parse."""
    timestamps = [t for t in (to_timestamp(v, pattern_config) for v in values) if t is not None]
    if not timestamps:
        return {}
    return {"min": min(timestamps), "max": max(timestamps)}


def compute_mode(values: Sequence[Any]) -> Any:
    """Most frequent value; ties go to the value seen first.

    Counter keeps insertion order and most_common() orders equal counts by
    first encounter, so ties are deterministic.

    Args:
        values: Non-null values

    Returns:
        The modal value (as first encountered), or None for no values
    """
    if not values:
        return None

    first_seen: dict[tuple[bool, Any], Any] = {}
    counts: Counter[tuple[bool, Any]] = Counter()
    for value in values:
        key = distinct_key(value)
        first_seen.setdefault(key, value)
        counts[key] += 1

    modal_key, _ = counts.most_common(1)[0]
    return first_seen[modal_key]
