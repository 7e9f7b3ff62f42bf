"""Chart-type suggestions from a profiled schema.

Pure function of the column types and stats; raw rows are never inspected.
Rules fire independently and append in priority order:

- temporal + numeric          -> line, area
- categorical + numeric       -> bar, column (+ pie, donut for a single
                                 categorical with at most 8 categories)
- 2+ numeric                  -> scatter (+ bubble for 3+)
- 2+ categorical              -> heatmap
- nothing fired               -> bar, line
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from bi_profiler.core.models.base import ChartType, ColumnType

if TYPE_CHECKING:
    from bi_profiler.dataset.models import Column

PIE_MAX_CATEGORIES = 8

FALLBACK_CHART_TYPES = (ChartType.BAR, ChartType.LINE)


def suggest_chart_types(columns: Sequence[Column]) -> list[ChartType]:
    """Suggest chart types that make sense for the given columns.

    Args:
        columns: Profiled columns

    Returns:
        Chart types in priority order
    """
    numeric = [c for c in columns if c.type == ColumnType.NUMERIC]
    categorical = [c for c in columns if c.type == ColumnType.CATEGORICAL]
    temporal = [c for c in columns if c.type == ColumnType.TEMPORAL]

    suggestions: list[ChartType] = []

    # Time series
    if temporal and numeric:
        suggestions.extend([ChartType.LINE, ChartType.AREA])

    # Categorical vs numeric
    if categorical and numeric:
        suggestions.extend([ChartType.BAR, ChartType.COLUMN])
        if len(categorical) == 1 and categorical[0].stats.unique_count <= PIE_MAX_CATEGORIES:
            suggestions.extend([ChartType.PIE, ChartType.DONUT])

    if len(numeric) >= 2:
        suggestions.append(ChartType.SCATTER)
        if len(numeric) >= 3:
            suggestions.append(ChartType.BUBBLE)

    # Categorical vs categorical
    if len(categorical) >= 2:
        suggestions.append(ChartType.HEATMAP)

    if not suggestions:
        suggestions.extend(FALLBACK_CHART_TYPES)

    return suggestions
