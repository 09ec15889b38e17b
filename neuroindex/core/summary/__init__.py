"""Report summary derived from the full list of IndexResults."""
from .aggregator import (
    AnalysisSummary,
    SummaryAggregator,
    summarize,
    overall_label,
    DEFAULT_RECOMMENDATION,
    OVERALL_WEIGHTS,
)

__all__ = [
    "AnalysisSummary",
    "SummaryAggregator",
    "summarize",
    "overall_label",
    "DEFAULT_RECOMMENDATION",
    "OVERALL_WEIGHTS",
]
