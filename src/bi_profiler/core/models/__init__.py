"""Shared models."""

from bi_profiler.core.models.base import (
    ChartType,
    ColumnRelationship,
    ColumnType,
    RelationshipKind,
    Result,
    SchemaField,
    SchemaFieldMode,
)

__all__ = [
    "ChartType",
    "ColumnRelationship",
    "ColumnType",
    "RelationshipKind",
    "Result",
    "SchemaField",
    "SchemaFieldMode",
]
