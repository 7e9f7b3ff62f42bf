"""Relationship detection between the columns of a profiled dataset.

Two kinds of relationship are reported as standalone ColumnRelationship values:

- correlation: Pearson r between two numeric columns, over the rows where
  both values coerce to numbers
- dependency: functional dependency A -> B between discrete columns
  (categorical, boolean, text), strength = share of A values with one B value

Results are never stored on the dataset; callers own them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from bi_profiler.analysis.correlation.algorithms import (
    compute_functional_dependencies,
    compute_pairwise_correlations,
)
from bi_profiler.analysis.typing.coercion import to_number
from bi_profiler.core.config import get_settings
from bi_profiler.core.logging import get_logger
from bi_profiler.core.models.base import ColumnRelationship, ColumnType, RelationshipKind

if TYPE_CHECKING:
    from bi_profiler.dataset.models import Dataset

logger = get_logger(__name__)

DEPENDENCY_COLUMN_TYPES = frozenset(
    {ColumnType.CATEGORICAL, ColumnType.BOOLEAN, ColumnType.TEXT}
)


def _as_float(value: object) -> float:
    """Numeric value of a cell, NaN when it does not parse."""
    number = to_number(value)
    return np.nan if number is None else number


def detect_correlations(
    dataset: Dataset,
    min_strength: float | None = None,
    min_samples: int | None = None,
) -> list[ColumnRelationship]:
    """Find linearly correlated numeric column pairs.

    Args:
        dataset: Profiled dataset
        min_strength: Minimum |r| to report (defaults to settings)
        min_samples: Minimum paired values per column pair (defaults to settings)

    Returns:
        Correlation relationships, strongest first
    """
    settings = get_settings()
    if min_strength is None:
        min_strength = settings.relationship_min_strength
    if min_samples is None:
        min_samples = settings.relationship_min_samples

    numeric = dataset.columns_of_type(ColumnType.NUMERIC)
    if len(numeric) < 2 or not dataset.rows:
        return []

    matrix = np.array(
        [[_as_float(row.get(col.name)) for col in numeric] for row in dataset.rows],
        dtype=np.float64,
    )

    results = compute_pairwise_correlations(
        matrix, min_correlation=min_strength, min_samples=min_samples
    )

    relationships = [
        ColumnRelationship(
            column1=numeric[r.col1_idx].name,
            column2=numeric[r.col2_idx].name,
            type=RelationshipKind.CORRELATION,
            strength=r.pearson_r,
        )
        for r in results
    ]
    relationships.sort(key=lambda rel: abs(rel.strength), reverse=True)

    logger.debug(
        "correlations_detected",
        dataset_id=dataset.id,
        numeric_columns=len(numeric),
        found=len(relationships),
    )
    return relationships


def detect_functional_dependencies(
    dataset: Dataset,
    min_confidence: float | None = None,
) -> list[ColumnRelationship]:
    """Find functional dependencies between discrete columns.

    Args:
        dataset: Profiled dataset
        min_confidence: Minimum confidence (defaults to settings)

    Returns:
        Dependency relationships (column1 determines column2)
    """
    if min_confidence is None:
        min_confidence = get_settings().dependency_min_confidence

    candidates = [c for c in dataset.columns if c.type in DEPENDENCY_COLUMN_TYPES]
    if len(candidates) < 2:
        return []

    results = compute_functional_dependencies(
        [dataset.column_values(c.name) for c in candidates],
        min_confidence=min_confidence,
    )

    relationships = [
        ColumnRelationship(
            column1=candidates[r.determinant_idx].name,
            column2=candidates[r.dependent_idx].name,
            type=RelationshipKind.DEPENDENCY,
            strength=r.confidence,
        )
        for r in results
    ]

    logger.debug(
        "dependencies_detected",
        dataset_id=dataset.id,
        candidate_columns=len(candidates),
        found=len(relationships),
    )
    return relationships


def detect_relationships(dataset: Dataset) -> list[ColumnRelationship]:
    """Detect correlations and functional dependencies with default thresholds."""
    return detect_correlations(dataset) + detect_functional_dependencies(dataset)
