"""
Scoring Module

Reference cohort, standard scores and percentile mapping.
"""
from .reference import (
    MetricReference,
    ReferenceEntry,
    ReferenceTable,
    REFERENCE_DATA_MALE,
    REFERENCE_TABLE,
)
from .standard_score import (
    z_score,
    metric_z_scores,
    composite_z_score,
    format_metric_weights,
)
from .percentile import (
    PercentileStrategy,
    normal_cdf,
    z_to_percentile,
    lateralization_percentile,
    linear_percentile,
    to_percentile,
    percentile_label,
    round_half_up,
)

__all__ = [
    "MetricReference",
    "ReferenceEntry",
    "ReferenceTable",
    "REFERENCE_DATA_MALE",
    "REFERENCE_TABLE",
    "z_score",
    "metric_z_scores",
    "composite_z_score",
    "format_metric_weights",
    "PercentileStrategy",
    "normal_cdf",
    "z_to_percentile",
    "lateralization_percentile",
    "linear_percentile",
    "to_percentile",
    "percentile_label",
    "round_half_up",
]
