"""On-demand dataset analysis.

Fills the suggestion and relationship slots of a Dataset's metadata. The input
Dataset is never modified; a new Dataset sharing the same columns and rows is
returned.
"""

from __future__ import annotations

from bi_profiler.analysis.charts.suggestions import suggest_chart_types
from bi_profiler.analysis.correlation.relationships import detect_relationships
from bi_profiler.core.logging import get_logger
from bi_profiler.dataset.models import Dataset

logger = get_logger(__name__)


def analyze_dataset(dataset: Dataset, include_relationships: bool = True) -> Dataset:
    """Return a copy of the dataset with suggestions and relationships filled in.

    Args:
        dataset: Assembled dataset
        include_relationships: Whether to run relationship detection

    Returns:
        New Dataset with populated metadata
    """
    suggestions = suggest_chart_types(dataset.columns)
    relationships = detect_relationships(dataset) if include_relationships else []

    metadata = dataset.metadata.model_copy(
        update={
            "suggested_chart_types": suggestions,
            "relationships": relationships,
        }
    )

    logger.info(
        "dataset_analyzed",
        dataset_id=dataset.id,
        suggestions=[s.value for s in suggestions],
        relationships=len(relationships),
    )
    return dataset.model_copy(update={"metadata": metadata})
