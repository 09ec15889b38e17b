"""
neuroindex - Structural index computation from cortical parcellation reports.

Usage:
    from neuroindex import StructuralAnalysisService

    report = StructuralAnalysisService().analyze_files(lh_path, rh_path)
"""
__version__ = "1.0.0"

from neuroindex.core.ingestion import Hemisphere, RegionMeasurement, parse_dkt_stats, load_dkt_stats
from neuroindex.core.indices import IndexEngine, IndexResult, INDEX_CATALOG, get_definition
from neuroindex.core.summary import AnalysisSummary, summarize
from neuroindex.core.validation import MeasurementValidator
from neuroindex.services import AnalysisReport, StructuralAnalysisService, run_analysis

__all__ = [
    "__version__",
    "Hemisphere",
    "RegionMeasurement",
    "parse_dkt_stats",
    "load_dkt_stats",
    "IndexEngine",
    "IndexResult",
    "INDEX_CATALOG",
    "get_definition",
    "AnalysisSummary",
    "summarize",
    "MeasurementValidator",
    "AnalysisReport",
    "StructuralAnalysisService",
    "run_analysis",
]
