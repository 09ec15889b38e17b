"""Pipeline services."""
from .analysis import AnalysisReport, StructuralAnalysisService, run_analysis

__all__ = ["AnalysisReport", "StructuralAnalysisService", "run_analysis"]
