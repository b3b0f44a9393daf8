import math
from typing import Tuple

from scipy import stats

from ppsample.scripts.validation import check_range


def get_z_score(confidence_level: float) -> float:
    """Calculate Z-score for given confidence level.

    Args:
        confidence_level: Confidence level (0-1, exclusive)

    Returns:
        Z-score value
    """
    if confidence_level == 0.90:
        return 1.645
    elif confidence_level == 0.95:
        return 1.960
    elif confidence_level == 0.99:
        return 2.576
    else:
        check_range(confidence_level, 0.0, 1.0, "confidence_level")
        p_value = (1 + confidence_level) / 2.0
        return float(stats.norm.ppf(p_value))


def calculate_confidence_interval(
    total: float, variance: float, confidence_level: float
) -> Tuple[float, float, float]:
    """Calculate a normal-approximation confidence interval for a total.

    Args:
        total: Estimated population total
        variance: Estimated variance of the total
        confidence_level: Confidence level (0-1)

    Returns:
        Tuple of (lower_bound, upper_bound, margin_of_error)

    Note:
        A negative variance estimate (possible with the Sen-Yates-Grundy
        estimator outside fixed-size designs) gives NaN bounds.
    """
    z = get_z_score(confidence_level)

    if not variance >= 0:
        return (math.nan, math.nan, math.nan)

    moe = z * math.sqrt(variance)
    return (total - moe, total + moe, moe)
