"""Core module - configuration, logging, and shared models."""

from bi_profiler.core.config import Settings, get_settings
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
    # Config
    "Settings",
    "get_settings",
    # Models - enums
    "ChartType",
    "ColumnType",
    "RelationshipKind",
    "SchemaFieldMode",
    # Models - data structures
    "ColumnRelationship",
    "Result",
    "SchemaField",
]
