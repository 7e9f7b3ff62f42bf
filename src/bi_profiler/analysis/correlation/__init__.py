"""Correlation analysis module.

Pure algorithms (Pearson correlation, functional dependencies) and their
application to profiled datasets.
"""

from bi_profiler.analysis.correlation.algorithms import (
    CorrelationResult,
    DependencyResult,
    classify_strength,
    compute_functional_dependencies,
    compute_pairwise_correlations,
    correlation,
    dependency_confidence,
)
from bi_profiler.analysis.correlation.relationships import (
    detect_correlations,
    detect_functional_dependencies,
    detect_relationships,
)

__all__ = [
    # Main entry points
    "correlation",
    "detect_relationships",
    "detect_correlations",
    "detect_functional_dependencies",
    # Algorithms
    "CorrelationResult",
    "DependencyResult",
    "classify_strength",
    "compute_functional_dependencies",
    "compute_pairwise_correlations",
    "dependency_confidence",
]
