"""Functional dependency detection on in-memory columns.

A functional dependency A -> B means that each distinct value of A maps to
exactly one value of B. Confidence is the share of distinct A values that do.
"""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bi_profiler.analysis.typing.coercion import distinct_key, is_null


@dataclass
class DependencyResult:
    """Result from dependency computation."""

    determinant_idx: int
    dependent_idx: int
    confidence: float
    unique_determinant_values: int
    violation_count: int


def dependency_confidence(
    determinant: Sequence[Any], dependent: Sequence[Any]
) -> tuple[float, int, int]:
    """Measure how well one column determines another.

    Rows where either side is null are ignored.

    Returns:
        (confidence, unique determinant values, violations)
    """
    targets: dict[tuple[bool, Any], set[tuple[bool, Any]]] = defaultdict(set)
    for a, b in zip(determinant, dependent, strict=True):
        if is_null(a) or is_null(b):
            continue
        targets[distinct_key(a)].add(distinct_key(b))

    total = len(targets)
    if total == 0:
        return 0.0, 0, 0

    violations = sum(1 for mapped in targets.values() if len(mapped) > 1)
    return (total - violations) / total, total, violations


def compute_functional_dependencies(
    columns: Sequence[Sequence[Any]],
    min_confidence: float = 0.95,
) -> list[DependencyResult]:
    """Detect single-column functional dependencies A -> B.

    A determinant whose non-null values are all distinct trivially determines
    every other column, so such columns are skipped as determinants.

    Args:
        columns: Column value sequences of equal length
        min_confidence: Minimum confidence (1.0 = exact FD)

    Returns:
        List of DependencyResult for ordered pairs at or above the threshold
    """
    results = []

    for i, col_a in enumerate(columns):
        present_a = [v for v in col_a if not is_null(v)]
        if not present_a or len({distinct_key(v) for v in present_a}) == len(present_a):
            continue

        for j, col_b in enumerate(columns):
            if i == j:
                continue

            confidence, unique_a, violations = dependency_confidence(col_a, col_b)
            if unique_a == 0 or confidence < min_confidence:
                continue

            results.append(
                DependencyResult(
                    determinant_idx=i,
                    dependent_idx=j,
                    confidence=confidence,
                    unique_determinant_values=unique_a,
                    violation_count=violations,
                )
            )

    return results
