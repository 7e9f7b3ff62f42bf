"""Chart recommendation module."""

from bi_profiler.analysis.charts.suggestions import (
    FALLBACK_CHART_TYPES,
    PIE_MAX_CATEGORIES,
    suggest_chart_types,
)

__all__ = [
    "FALLBACK_CHART_TYPES",
    "PIE_MAX_CATEGORIES",
    "suggest_chart_types",
]
