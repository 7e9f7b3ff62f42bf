"""Type inference module.

Value-based classification of columns into semantic types, plus the scalar
coercion helpers and date patterns it relies on.
"""

from bi_profiler.analysis.typing.coercion import (
    Scalar,
    distinct_key,
    is_null,
    non_null,
    to_number,
    to_string_form,
    to_timestamp,
)
from bi_profiler.analysis.typing.inference import infer_column_type
from bi_profiler.analysis.typing.patterns import (
    DatePattern,
    PatternConfig,
    PatternConfigError,
    get_pattern_config,
    load_pattern_config,
)

__all__ = [
    # Main entry point
    "infer_column_type",
    # Coercion
    "Scalar",
    "distinct_key",
    "is_null",
    "non_null",
    "to_number",
    "to_string_form",
    "to_timestamp",
    # Patterns
    "DatePattern",
    "PatternConfig",
    "PatternConfigError",
    "get_pattern_config",
    "load_pattern_config",
]
