"""Pure numeric correlation algorithms.

Computes Pearson correlations on sequences and numpy arrays.
No dataset models, no logging - just math.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from scipy import stats


@dataclass
class CorrelationResult:
    """Result from correlation computation."""

    col1_idx: int
    col2_idx: int
    pearson_r: float
    pearson_p: float | None
    sample_size: int
    strength: str  # 'none', 'weak', 'moderate', 'strong', 'very_strong'
    is_significant: bool


def correlation(a: Sequence[float], b: Sequence[float]) -> float:
    """Pearson product-moment correlation of two equal-length sequences.

    Mismatched lengths, empty input, non-finite values and constant sequences
    carry no evidence of correlation and return 0.0 instead of raising or
    producing NaN.

    Both sequences are rescaled by their largest magnitude before the sums
    are formed; r is scale-invariant, and the sums then stay finite and
    non-zero for values near the float64 limits.

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        Correlation coefficient in [-1, 1]
    """
    if len(a) != len(b) or len(a) == 0:
        return 0.0

    x = np.asarray(a, dtype=np.float64)
    y = np.asarray(b, dtype=np.float64)
    if not (np.isfinite(x).all() and np.isfinite(y).all()):
        return 0.0
    # Exact test on the raw values; a centered constant can carry rounding noise
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0

    dx = _centered_unit(x)
    dy = _centered_unit(y)

    numerator = float(np.sum(dx * dy))
    denominator = float(np.sqrt(np.sum(dx * dx) * np.sum(dy * dy)))
    if denominator == 0.0 or not np.isfinite(numerator / denominator):
        return 0.0

    return float(np.clip(numerator / denominator, -1.0, 1.0))


def _centered_unit(values: np.ndarray) -> np.ndarray:
    """Center a non-constant array and scale it so max |value| is 1."""
    scaled = values / np.abs(values).max()
    centered = scaled - scaled.mean()
    peak = np.abs(centered).max()
    return centered / peak if peak > 0 else centered


def classify_strength(r: float) -> str:
    """Classify correlation strength by absolute value."""
    abs_r = abs(r)
    if abs_r >= 0.9:
        return "very_strong"
    elif abs_r >= 0.7:
        return "strong"
    elif abs_r >= 0.5:
        return "moderate"
    elif abs_r >= 0.3:
        return "weak"
    return "none"


def _p_value(x: np.ndarray, y: np.ndarray) -> float | None:
    """Two-sided p-value of the Pearson r, or None when it is undefined."""
    if len(x) < 3 or np.ptp(x) == 0 or np.ptp(y) == 0:
        return None
    _, p = stats.pearsonr(_centered_unit(x), _centered_unit(y))
    p_float = float(np.asarray(p).item())
    return p_float if np.isfinite(p_float) else None


def compute_pairwise_correlations(
    data: np.ndarray,
    min_correlation: float = 0.3,
    min_samples: int = 3,
) -> list[CorrelationResult]:
    """Compute Pearson correlations for all column pairs.

    Args:
        data: 2D array where each column is a variable (rows are observations)
        min_correlation: Minimum |r| to include in results
        min_samples: Minimum observations required

    Returns:
        List of CorrelationResult for pairs above threshold
    """
    n_cols = data.shape[1]
    results = []

    for i in range(n_cols):
        for j in range(i + 1, n_cols):
            col1 = data[:, i]
            col2 = data[:, j]

            # Remove NaN pairs
            mask = ~(np.isnan(col1) | np.isnan(col2))
            col1_clean = col1[mask]
            col2_clean = col2[mask]

            if len(col1_clean) < min_samples:
                continue

            r = correlation(col1_clean, col2_clean)
            if abs(r) < min_correlation:
                continue

            p = _p_value(col1_clean, col2_clean)

            results.append(
                CorrelationResult(
                    col1_idx=i,
                    col2_idx=j,
                    pearson_r=r,
                    pearson_p=p,
                    sample_size=len(col1_clean),
                    strength=classify_strength(r),
                    is_significant=p is not None and p < 0.05,
                )
            )

    return results
