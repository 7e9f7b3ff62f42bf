"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (typing, statistics, correlation, charts).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


# === Enums ===


class ColumnType(str, Enum):
    """Semantic type of a profiled column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    TEMPORAL = "temporal"
    TEXT = "text"
    BOOLEAN = "boolean"


class ChartType(str, Enum):
    """Chart types offered by the chart builder."""

    LINE = "line"
    AREA = "area"
    BAR = "bar"
    COLUMN = "column"
    SCATTER = "scatter"
    BUBBLE = "bubble"
    PIE = "pie"
    DONUT = "donut"
    HEATMAP = "heatmap"
    TREEMAP = "treemap"
    COMBO = "combo"


class RelationshipKind(str, Enum):
    """Kind of relationship between two columns."""

    CORRELATION = "correlation"  # Linear correlation between numeric columns
    DEPENDENCY = "dependency"  # Functional dependency A -> B


class SchemaFieldMode(str, Enum):
    """Field mode declared by a warehouse schema."""

    NULLABLE = "NULLABLE"
    REQUIRED = "REQUIRED"
    REPEATED = "REPEATED"


# === Shared value models ===


class ColumnRelationship(BaseModel):
    """A derived fact about two columns.

    Columns never reference each other; relationships are standalone values
    owned by whoever requested them.
    """

    column1: str
    column2: str
    type: RelationshipKind
    strength: float


class SchemaField(BaseModel):
    """A field of a source-declared schema (e.g. a BigQuery result set)."""

    name: str
    type: str
    mode: SchemaFieldMode = SchemaFieldMode.NULLABLE
