"""Pure correlation algorithms.

These functions operate on sequences and numpy arrays and return plain
dataclasses. No dataset models, no logging - just math.
"""

from bi_profiler.analysis.correlation.algorithms.dependency import (
    DependencyResult,
    compute_functional_dependencies,
    dependency_confidence,
)
from bi_profiler.analysis.correlation.algorithms.numeric import (
    CorrelationResult,
    classify_strength,
    compute_pairwise_correlations,
    correlation,
)

__all__ = [
    # Numeric
    "CorrelationResult",
    "classify_strength",
    "compute_pairwise_correlations",
    "correlation",
    # Dependency
    "DependencyResult",
    "compute_functional_dependencies",
    "dependency_confidence",
]
