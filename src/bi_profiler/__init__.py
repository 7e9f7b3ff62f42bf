"""BI Profiler.

Dataset profiling engine for a business-intelligence dashboard: infers column
types, computes descriptive statistics, suggests chart types and detects
relationships between columns.

Example:
    from bi_profiler import analyze_dataset, assemble

    dataset = assemble("ds-1", "Sales", "upload-1", rows)
    dataset.columns[0].type
    analyze_dataset(dataset).metadata.suggested_chart_types
"""

__version__ = "0.1.0"

from bi_profiler.analysis.charts import suggest_chart_types
from bi_profiler.analysis.correlation import correlation, detect_relationships
from bi_profiler.analysis.statistics import ColumnStats, compute_column_stats
from bi_profiler.analysis.typing import infer_column_type
from bi_profiler.core.models.base import (
    ChartType,
    ColumnRelationship,
    ColumnType,
    RelationshipKind,
    Result,
    SchemaField,
)
from bi_profiler.dataset import (
    Column,
    Dataset,
    DatasetMetadata,
    EmptyDataError,
    analyze_dataset,
    assemble,
    profile_many,
)

__all__ = [
    # Operations
    "assemble",
    "analyze_dataset",
    "profile_many",
    "infer_column_type",
    "compute_column_stats",
    "correlation",
    "detect_relationships",
    "suggest_chart_types",
    # Models
    "ChartType",
    "Column",
    "ColumnRelationship",
    "ColumnStats",
    "ColumnType",
    "Dataset",
    "DatasetMetadata",
    "RelationshipKind",
    "Result",
    "SchemaField",
    # Errors
    "EmptyDataError",
    "__version__",
]
