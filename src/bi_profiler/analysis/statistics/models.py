"""Statistical Profile Models.

- ColumnStats: descriptive statistics for one column, conditioned on its type
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class ColumnStats(BaseModel):
    """Descriptive statistics of a column.

    min/max are floats for numeric columns and UTC timestamps for temporal
    columns; mean/median/std_dev exist only for numeric columns. mode is set
    whenever the column has at least one non-null value.
    """

    model_config = ConfigDict(frozen=True)

    count: int
    null_count: int
    unique_count: int

    min: float | datetime | None = None
    max: float | datetime | None = None
    mean: float | None = None
    median: float | None = None
    mode: Any = None
    std_dev: float | None = None  # Population standard deviation

    @property
    def non_null_count(self) -> int:
        """Number of non-null values."""
        return self.count - self.null_count

    @property
    def null_ratio(self) -> float:
        """Share of null values (0.0 for an empty column)."""
        return self.null_count / self.count if self.count else 0.0

    @property
    def cardinality_ratio(self) -> float:
        """Distinct non-null values relative to non-null values."""
        present = self.non_null_count
        return self.unique_count / present if present else 0.0
