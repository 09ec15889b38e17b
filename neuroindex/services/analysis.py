"""
Structural Analysis Service

End-to-end pipeline: two hemisphere maps (or report texts, or report files)
in, one AnalysisReport out. Validation runs first and is attached to the
report; it never changes the computed indices.

Usage:
    from neuroindex.services import StructuralAnalysisService

    service = StructuralAnalysisService()
    report = service.analyze_files("lh.aparc.DKTatlas.stats", "rh.aparc.DKTatlas.stats")
    print(report.summary.top_strengths)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from neuroindex import config
from neuroindex.core.indices import IndexEngine, IndexResult
from neuroindex.core.ingestion import Hemisphere, HemisphereMap, load_dkt_stats, parse_dkt_stats
from neuroindex.core.summary import AnalysisSummary, SummaryAggregator
from neuroindex.core.validation import MeasurementValidator, ValidationResult
from neuroindex.utils import get_logger

logger = get_logger(__name__)


@dataclass
class AnalysisReport:
    """Indices in catalog order, their summary and per-hemisphere validation."""
    indices: List[IndexResult]
    summary: AnalysisSummary
    validation: Dict[Hemisphere, ValidationResult] = field(default_factory=dict)

    def get(self, key: str) -> Optional[IndexResult]:
        for result in self.indices:
            if result.key == key:
                return result
        return None

    def to_dict(self) -> dict:
        return {
            "indices": [r.to_dict() for r in self.indices],
            "summary": self.summary.to_dict(),
            "validation": {h.value: v.to_dict() for h, v in self.validation.items()},
        }


class StructuralAnalysisService:
    """
    Wires validator → engine → summary.

    Stateless apart from its collaborators; one instance serves any number
    of subjects.
    """

    def __init__(
        self,
        engine: Optional[IndexEngine] = None,
        validator: Optional[MeasurementValidator] = None,
        aggregator: Optional[SummaryAggregator] = None,
        strict: Optional[bool] = None,
    ):
        self.engine = engine or IndexEngine()
        self.validator = validator or MeasurementValidator(reference=self.engine.reference)
        self.aggregator = aggregator or SummaryAggregator()
        self.strict = config.STRICT_VALIDATION if strict is None else strict

    def analyze(self, left: HemisphereMap, right: HemisphereMap) -> AnalysisReport:
        """Validate both maps, compute every index and summarize."""
        validation = {
            Hemisphere.LEFT: self.validator.validate(left, Hemisphere.LEFT, strict=self.strict),
            Hemisphere.RIGHT: self.validator.validate(right, Hemisphere.RIGHT, strict=self.strict),
        }
        for hemisphere, result in validation.items():
            scored = [v for v in result.violations if v.severity > 0]
            if scored:
                logger.warning(
                    f"[{hemisphere.value}] {len(scored)} measurement issue(s): "
                    + "; ".join(v.message for v in scored[:5])
                )

        indices = self.engine.evaluate_all(left, right)
        summary = self.aggregator.summarize(indices)

        logger.info(
            f"Analysis complete: {len(indices)} indices, "
            f"{len(summary.top_strengths)} strength(s), "
            f"{len(summary.special_features)} special feature(s), "
            f"overall={summary.overall_score} ({summary.overall_label})"
        )
        return AnalysisReport(indices=indices, summary=summary, validation=validation)

    def analyze_text(self, lh_text: str, rh_text: str) -> AnalysisReport:
        """Parse two report texts and analyze them."""
        return self.analyze(parse_dkt_stats(lh_text), parse_dkt_stats(rh_text))

    def analyze_files(self, lh_path: Union[str, Path], rh_path: Union[str, Path]) -> AnalysisReport:
        """Load two report files and analyze them; raises IngestionError."""
        logger.info(f"Loading reports: lh={lh_path}, rh={rh_path}")
        return self.analyze(load_dkt_stats(lh_path), load_dkt_stats(rh_path))


def run_analysis(left: HemisphereMap, right: HemisphereMap) -> AnalysisReport:
    """Analyze two hemisphere maps with a default service."""
    return StructuralAnalysisService().analyze(left, right)
