"""
Percentile Mapping

Converts an index value into a 1-99 population percentile. Three
strategies coexist and are selected per index definition; they encode
different distributional assumptions and must not be unified:

  NORMAL_CDF               Abramowitz & Stegun 7.1.26 rational polynomial
                           in t = 1/(1 + p·|z|) with an exp(-z²/2) kernel.
                           This is the published scoring curve, not an exact
                           Φ: z = 1 maps to 87, z = 2 to 98.
  LATERALIZATION_PIECEWISE piecewise-linear mapping anchored at
                           0.20 / 0.05 / -0.05 / -0.15, fitted to the
                           ENIGMA 2024 language lateralization mixture.
  LINEAR                   50 + 40·x, used by the nostril index.

Rounding everywhere is half-up (``floor(x + 0.5)``) so results match
the reference outputs at .5 boundaries.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Optional

# Abramowitz & Stegun 7.1.26
A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911

PERCENTILE_MIN = 1
PERCENTILE_MAX = 99


class PercentileStrategy(str, Enum):
    NORMAL_CDF = "normal_cdf"
    LATERALIZATION_PIECEWISE = "lateralization_piecewise"
    LINEAR = "linear"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties toward +inf. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _clamp_percentile(value: float) -> int:
    return int(max(PERCENTILE_MIN, min(PERCENTILE_MAX, value)))


def normal_cdf(z: float) -> float:
    """Cumulative score curve, 0.5·(1 + sign(z)·y), with the A&S polynomial."""
    sign = -1 if z < 0 else 1
    abs_z = abs(z)
    t = 1.0 / (1.0 + P * abs_z)
    y = 1.0 - (((((A5 * t + A4) * t) + A3) * t + A2) * t + A1) * t * math.exp(-abs_z * abs_z / 2)
    return 0.5 * (1.0 + sign * y)


def z_to_percentile(z: float) -> Optional[int]:
    """Standard score → percentile in [1, 99]; None for NaN."""
    if math.isnan(z):
        return None
    return _clamp_percentile(round_half_up(normal_cdf(z) * 100))


def lateralization_percentile(li: float) -> Optional[int]:
    """Normalized lateralization index (≈[-1, 1]) → percentile in [1, 99]."""
    if math.isnan(li):
        return None
    if li >= 0.20:
        percentile = min(99, 95 + (li - 0.20) * 20)
    elif li >= 0.05:
        percentile = 80 + (li - 0.05) * 100
    elif li >= -0.05:
        percentile = 50 + li * 300
    elif li >= -0.15:
        percentile = 20 + (li + 0.05) * 300
    else:
        percentile = max(1, 5 + (li + 0.15) * 100)
    return _clamp_percentile(round_half_up(percentile))


def linear_percentile(value: float) -> Optional[int]:
    """50 + 40·value, clamped to [1, 99]."""
    if math.isnan(value):
        return None
    return _clamp_percentile(round_half_up(50 + value * 40))


_STRATEGIES = {
    PercentileStrategy.NORMAL_CDF: z_to_percentile,
    PercentileStrategy.LATERALIZATION_PIECEWISE: lateralization_percentile,
    PercentileStrategy.LINEAR: linear_percentile,
}


def to_percentile(
    value: float,
    strategy: PercentileStrategy = PercentileStrategy.NORMAL_CDF,
) -> Optional[int]:
    """Dispatch to the mapping registered for ``strategy``."""
    return _STRATEGIES[strategy](value)


def percentile_label(percentile: Optional[int]) -> str:
    """Qualitative rank band for a percentile."""
    if percentile is None:
        return "Indeterminate"
    if percentile >= 98:
        return "Exceptional"
    if percentile >= 93:
        return "Excellent"
    if percentile >= 84:
        return "Good"
    if percentile >= 70:
        return "Above average"
    if percentile >= 30:
        return "Average"
    if percentile >= 16:
        return "Below average"
    return "Needs attention"
