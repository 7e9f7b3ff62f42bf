"""Shared pytest fixtures for all tests."""

import pytest

from bi_profiler.analysis.typing.patterns import get_pattern_config
from bi_profiler.core.config import get_settings
from bi_profiler.dataset import Dataset, assemble

REGIONS = ["North", "South", "East"]
MANAGERS = {"North": "Alice", "South": "Bob", "East": "Carol"}


@pytest.fixture(autouse=True)
def _clear_caches():
    """Reset cached settings and patterns so env overrides don't leak between tests."""
    get_settings.cache_clear()
    get_pattern_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_pattern_config.cache_clear()


@pytest.fixture
def sales_rows() -> list[dict]:
    """Twelve daily sales rows.

    order_date is temporal, region/manager are categorical (region -> manager
    is a functional dependency), units/revenue are perfectly correlated.
    """
    rows = []
    for i in range(12):
        region = REGIONS[i % 3]
        rows.append(
            {
                "order_date": f"2024-01-{i + 1:02d}",
                "region": region,
                "manager": MANAGERS[region],
                "units": i + 1,
                "revenue": (i + 1) * 10.0,
            }
        )
    return rows


@pytest.fixture
def sales_dataset(sales_rows) -> Dataset:
    """Assembled sales dataset."""
    return assemble("ds-sales", "Sales", "upload-1", sales_rows)
