"""Dataset assembly and analysis.

Entry point for collaborators that hand over decoded rows:

    dataset = assemble("ds-1", "Sales", "src-1", rows)
    dataset = analyze_dataset(dataset)
"""

from bi_profiler.dataset.analysis import analyze_dataset
from bi_profiler.dataset.assembly import (
    EmptyDataError,
    ProfileRequest,
    assemble,
    discover_column_names,
    profile_column,
    profile_many,
)
from bi_profiler.dataset.models import Column, Dataset, DatasetMetadata

__all__ = [
    # Main entry points
    "assemble",
    "analyze_dataset",
    "profile_many",
    "profile_column",
    "discover_column_names",
    # Errors
    "EmptyDataError",
    # Models
    "Column",
    "Dataset",
    "DatasetMetadata",
    "ProfileRequest",
]
