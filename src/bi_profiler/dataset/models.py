"""Dataset models.

- Column: a profiled column (type + stats), immutable once built
- DatasetMetadata: analysis timestamp plus the lazily filled suggestion and
  relationship slots
- Dataset: the profiled dataset handed to chart-building collaborators
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bi_profiler.analysis.statistics.models import ColumnStats
from bi_profiler.core.models.base import ChartType, ColumnRelationship, ColumnType


class Column(BaseModel):
    """A profiled column.

    The type is derived once at profiling time; re-profiling builds a new
    Column rather than patching this one.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: ColumnType
    original_type: str = "string"  # Type label declared by the source
    nullable: bool
    unique: bool
    stats: ColumnStats


class DatasetMetadata(BaseModel):
    """Analysis metadata of a dataset."""

    model_config = ConfigDict(frozen=True)

    analyzed_at: datetime
    suggested_chart_types: list[ChartType] = Field(default_factory=list)
    relationships: list[ColumnRelationship] = Field(default_factory=list)


class Dataset(BaseModel):
    """A profiled dataset.

    Owns its columns and raw rows. Derived views (suggestions, relationships)
    are computed on demand and never mutate an existing Dataset.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    source_id: str
    columns: list[Column]
    row_count: int
    rows: list[Mapping[str, Any]]
    metadata: DatasetMetadata

    @property
    def column_names(self) -> list[str]:
        """Column names in dataset order."""
        return [c.name for c in self.columns]

    def get_column(self, name: str) -> Column | None:
        """Look up a column by name."""
        return next((c for c in self.columns if c.name == name), None)

    def columns_of_type(self, column_type: ColumnType) -> list[Column]:
        """Columns with the given type, in dataset order."""
        return [c for c in self.columns if c.type == column_type]

    def column_values(self, name: str) -> list[Any]:
        """Raw values of a column; a missing key reads as None."""
        return [row.get(name) for row in self.rows]
