"""Column type inference from values.

Classifies a column into one semantic ColumnType by testing rules in a fixed
priority order. The first rule whose share of non-null values exceeds its
threshold wins:

1. temporal    - share parseable as a calendar date/time > 0.8
2. numeric     - share parseable as a finite float > 0.8
3. boolean     - share spelled true/false/0/1/yes/no > 0.8
4. categorical - distinct/non-null ratio < 0.5
5. text        - everything else (including all-null columns)

The order matters: a 0/1 flag column is numeric, never boolean or categorical.
Comparisons are strict, so a share of exactly 0.8 falls through.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from bi_profiler.analysis.typing.coercion import (
    distinct_key,
    non_null,
    to_number,
    to_string_form,
    to_timestamp,
)
from bi_profiler.analysis.typing.patterns import PatternConfig, get_pattern_config
from bi_profiler.core.models.base import ColumnType

TEMPORAL_THRESHOLD = 0.8
NUMERIC_THRESHOLD = 0.8
BOOLEAN_THRESHOLD = 0.8
CATEGORICAL_MAX_CARDINALITY = 0.5

BOOLEAN_LITERALS = frozenset({"true", "false", "0", "1", "yes", "no"})


def infer_column_type(
    values: Sequence[Any],
    pattern_config: PatternConfig | None = None,
) -> ColumnType:
    """Infer the semantic type of a column.

    Total over any input: never raises.

    Args:
        values: Raw column values, nulls included
        pattern_config: Date patterns to use (defaults to the packaged config)

    Returns:
        The inferred ColumnType
    """
    present = non_null(list(values))
    if not present:
        return ColumnType.TEXT

    total = len(present)
    config = pattern_config or get_pattern_config()

    date_count = sum(1 for v in present if to_timestamp(v, config) is not None)
    if date_count / total > TEMPORAL_THRESHOLD:
        return ColumnType.TEMPORAL

    numeric_count = sum(1 for v in present if to_number(v) is not None)
    if numeric_count / total > NUMERIC_THRESHOLD:
        return ColumnType.NUMERIC

    boolean_count = sum(1 for v in present if to_string_form(v).lower() in BOOLEAN_LITERALS)
    if boolean_count / total > BOOLEAN_THRESHOLD:
        return ColumnType.BOOLEAN

    distinct = {distinct_key(v) for v in present}
    if len(distinct) / total < CATEGORICAL_MAX_CARDINALITY:
        return ColumnType.CATEGORICAL

    return ColumnType.TEXT
