"""Tests for relationship detection on assembled datasets."""

import math

import pytest

from bi_profiler.analysis.correlation import (
    detect_correlations,
    detect_functional_dependencies,
    detect_relationships,
)
from bi_profiler.core.models.base import RelationshipKind
from bi_profiler.dataset import assemble

NOISE = [5, 3, 8, 1, 9, 2, 7, 4, 10, 6]


@pytest.fixture
def metrics_dataset():
    """Three numeric columns: a and b are linear, c is weakly related noise."""
    rows = [{"a": i + 1, "b": (i + 1) * 2, "c": NOISE[i]} for i in range(10)]
    return assemble("ds-metrics", "Metrics", "src", rows)


class TestDetectCorrelations:
    def test_sales_units_and_revenue(self, sales_dataset):
        relationships = detect_correlations(sales_dataset)

        assert len(relationships) == 1
        rel = relationships[0]
        assert (rel.column1, rel.column2) == ("units", "revenue")
        assert rel.type == RelationshipKind.CORRELATION
        assert rel.strength == pytest.approx(1.0)

    def test_weak_pairs_filtered_by_default(self, metrics_dataset):
        relationships = detect_correlations(metrics_dataset)
        assert [(r.column1, r.column2) for r in relationships] == [("a", "b")]

    def test_min_strength_override(self, metrics_dataset):
        relationships = detect_correlations(metrics_dataset, min_strength=0.0)

        assert len(relationships) == 3
        assert (relationships[0].column1, relationships[0].column2) == ("a", "b")
        strengths = [abs(r.strength) for r in relationships]
        assert strengths == sorted(strengths, reverse=True)

    def test_min_strength_from_settings(self, metrics_dataset, monkeypatch):
        monkeypatch.setenv("BI_PROFILER_RELATIONSHIP_MIN_STRENGTH", "0.1")
        assert len(detect_correlations(metrics_dataset)) == 3

    def test_numeric_strings_are_coerced(self):
        rows = [{"x": str(i), "y": i * 3} for i in range(1, 6)]
        dataset = assemble("ds", "Strings", "src", rows)

        relationships = detect_correlations(dataset)

        assert relationships[0].strength == pytest.approx(1.0)

    def test_needs_two_numeric_columns(self):
        rows = [{"x": i, "label": "abcdefghij"[i]} for i in range(10)]
        dataset = assemble("ds", "Single", "src", rows)

        assert detect_correlations(dataset) == []

    def test_too_few_paired_values(self):
        rows = [{"x": 1, "y": 2}, {"x": 2, "y": 4}]
        dataset = assemble("ds", "Tiny", "src", rows)

        assert detect_correlations(dataset) == []
        assert len(detect_correlations(dataset, min_samples=2)) == 1

    def test_extreme_magnitudes_give_finite_strengths(self):
        rows = [
            {"big": (i + 1) * 1e200, "tiny": (i + 1) * 1e-170, "cycle": i % 3}
            for i in range(6)
        ]
        dataset = assemble("ds", "Extremes", "src", rows)

        relationships = detect_correlations(dataset, min_strength=0.0)

        assert len(relationships) == 3
        assert all(math.isfinite(r.strength) for r in relationships)
        assert (relationships[0].column1, relationships[0].column2) == ("big", "tiny")
        assert relationships[0].strength == pytest.approx(1.0)


class TestDetectFunctionalDependencies:
    def test_region_determines_manager(self, sales_dataset):
        relationships = detect_functional_dependencies(sales_dataset)

        pairs = {(r.column1, r.column2) for r in relationships}
        assert pairs == {("region", "manager"), ("manager", "region")}
        assert all(r.type == RelationshipKind.DEPENDENCY for r in relationships)
        assert all(r.strength == 1.0 for r in relationships)

    def test_numeric_columns_are_not_candidates(self, metrics_dataset):
        assert detect_functional_dependencies(metrics_dataset) == []

    def test_min_confidence_override(self):
        rows = [
            {"city": c, "country": k}
            for c, k in [("Paris", "FR"), ("Paris", "FR"), ("Lyon", "FR"), ("Paris", "DE")] * 3
        ]
        dataset = assemble("ds", "Cities", "src", rows)

        assert ("city", "country") not in {
            (r.column1, r.column2) for r in detect_functional_dependencies(dataset)
        }
        loose = detect_functional_dependencies(dataset, min_confidence=0.5)
        assert ("city", "country") in {(r.column1, r.column2) for r in loose}


def test_detect_relationships_lists_correlations_first(sales_dataset):
    relationships = detect_relationships(sales_dataset)

    assert [r.type for r in relationships] == [
        RelationshipKind.CORRELATION,
        RelationshipKind.DEPENDENCY,
        RelationshipKind.DEPENDENCY,
    ]


def test_dataset_is_not_modified(sales_dataset):
    detect_relationships(sales_dataset)
    assert sales_dataset.metadata.relationships == []
