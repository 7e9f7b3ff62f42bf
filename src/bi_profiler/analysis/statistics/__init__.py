"""Statistical profiling module.

Computes column-level statistics on raw values:
- Basic counts (total, null, distinct)
- Mode (most frequent value)
- Numeric stats (min, max, mean, median, population stddev)
- Temporal range (earliest, latest)
"""

from bi_profiler.analysis.statistics.models import ColumnStats
from bi_profiler.analysis.statistics.profiler import compute_column_stats, compute_mode

__all__ = [
    "ColumnStats",
    "compute_column_stats",
    "compute_mode",
]
