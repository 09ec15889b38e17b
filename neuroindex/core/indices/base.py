"""
Index Layer - Base Types

Declarative description of a structural index (IndexDefinition) and the
records the generic evaluator produces from it (RegionContribution,
IndexResult). Definitions are data: adding an index means adding a
catalog entry, never a new evaluation function.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from neuroindex.core.scoring.percentile import PercentileStrategy
from neuroindex.core.scoring.standard_score import MetricWeights


class CombinationRule(str, Enum):
    """
    How per-region composite scores are folded into one index value.

    ASYMMETRY              Σ w·(z_side1 − z_side2)
    BLENDED_MEAN           Σ w·(α·z_L + β·z_R)
    NORMALIZED_DIFFERENCE  (Σw·z_L − Σw·z_R) / (|Σw·z_L| + |Σw·z_R| + ε)
    """
    ASYMMETRY = "asymmetry"
    BLENDED_MEAN = "blended_mean"
    NORMALIZED_DIFFERENCE = "normalized_difference"


class SignConvention(str, Enum):
    """Side order for ASYMMETRY indices; the first side counts positive."""
    LEFT_MINUS_RIGHT = "left_minus_right"
    RIGHT_MINUS_LEFT = "right_minus_left"


class IndexCategory(str, Enum):
    """Report section an index belongs to."""
    BASIC_LATERALIZATION = "basic_lateralization"
    ADVANCED_LATERALIZATION = "advanced_lateralization"
    PERCEPTION = "perception"
    LANGUAGE_READING = "language_reading"
    COGNITION = "cognition"


@dataclass(frozen=True)
class RegionSpec:
    """
    One contributing region.

    ``region`` is the DKT key looked up in both hemisphere maps and the
    reference table. ``label`` is what the report shows; it differs when a
    region stands in for one the atlas lacks (piriform → entorhinal).
    """
    region: str
    weight: float
    metric_weights: MetricWeights
    label: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label or self.region


@dataclass(frozen=True)
class IndexDefinition:
    """Static recipe for one named index."""
    key: str
    name: str
    name_cn: str
    category: IndexCategory
    rule: CombinationRule
    regions: Tuple[RegionSpec, ...]
    precision: int = 2
    sign: Optional[SignConvention] = None
    hemisphere_blend: Optional[Tuple[float, float]] = None   # (α, β) for BLENDED_MEAN
    epsilon: float = 0.001                                   # NORMALIZED_DIFFERENCE only
    normalize_by_coverage: bool = False
    percentile_strategy: PercentileStrategy = PercentileStrategy.NORMAL_CDF

    # ── Display metadata (carried through unchanged) ──────────────────────
    formula: str = ""
    references: Tuple[str, ...] = ()
    threshold: str = ""
    weights_text: str = ""

    def __post_init__(self):
        if self.rule == CombinationRule.ASYMMETRY and self.sign is None:
            raise ValueError(f"{self.key}: ASYMMETRY indices need a sign convention")
        if self.rule == CombinationRule.BLENDED_MEAN and self.hemisphere_blend is None:
            raise ValueError(f"{self.key}: BLENDED_MEAN indices need a hemisphere blend")

    @property
    def total_weight(self) -> float:
        total = 0.0
        for spec in self.regions:
            total += spec.weight
        return total


@dataclass(frozen=True)
class RegionContribution:
    """Per-region audit record, values rounded to 3 dp."""
    region: str
    region_weight: float
    z_left: float
    z_right: float
    contrib_left: float
    contrib_right: float
    weights_used: str

    def to_dict(self) -> dict:
        return {
            "region": self.region,
            "region_weight": self.region_weight,
            "z_left": self.z_left,
            "z_right": self.z_right,
            "contrib_left": self.contrib_left,
            "contrib_right": self.contrib_right,
            "weights_used": self.weights_used,
        }


@dataclass(frozen=True)
class IndexResult:
    """
    One evaluated index.

    ``value`` is rounded to the definition's precision; ``percentile`` and
    ``interpretation`` are derived from the unrounded value. ``coverage`` is
    the fraction of region weight that had data in both hemispheres; it is
    reported for transparency only and does not alter the interpretation.
    """
    key: str
    name: str
    name_cn: str
    category: IndexCategory
    value: float
    percentile: Optional[int]
    percentile_label: str
    interpretation: str
    coverage: float
    contributions: List[RegionContribution] = field(default_factory=list)
    risk_level: Optional[str] = None
    z_score: Optional[float] = None

    # ── Metadata from the definition ──────────────────────────────────────
    formula: str = ""
    references: Tuple[str, ...] = ()
    regions: Tuple[str, ...] = ()
    threshold: str = ""
    weights: str = ""

    @property
    def has_signal(self) -> bool:
        """True when any contributing region deviated from the reference."""
        return any(c.z_left != 0 or c.z_right != 0 for c in self.contributions)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "name_cn": self.name_cn,
            "category": self.category.value,
            "value": self.value,
            "percentile": self.percentile,
            "percentile_label": self.percentile_label,
            "interpretation": self.interpretation,
            "risk_level": self.risk_level,
            "z_score": self.z_score,
            "coverage": round(self.coverage, 3),
            "formula": self.formula,
            "references": list(self.references),
            "regions": list(self.regions),
            "threshold": self.threshold,
            "weights": self.weights,
            "details": [c.to_dict() for c in self.contributions],
        }
