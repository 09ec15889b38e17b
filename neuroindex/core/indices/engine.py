"""
Structural Index Engine

One generic evaluator for every catalog entry. Takes the two hemisphere
maps and returns IndexResults; holds no state between calls.

Usage:
    from neuroindex.core.indices import IndexEngine

    engine = IndexEngine()
    results = engine.evaluate_all(left_map, right_map)
    for r in results:
        print(r.name, r.value, r.percentile, r.interpretation)

Missing data policy:
    A region absent from either hemisphere map or from the reference table
    is skipped silently. The index is the sum over the regions that remain,
    so an index with no usable region evaluates to 0.0, exactly like a
    perfectly average subject. ``IndexResult.coverage`` reports how much of
    the region weight was actually available.

NaN measurements are not trapped: they propagate into the value, the
percentile becomes None and the interpretation reports indeterminate.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from neuroindex.core.ingestion.base import HemisphereMap
from neuroindex.core.scoring.percentile import (
    PercentileStrategy,
    percentile_label,
    round_half_up,
    to_percentile,
)
from neuroindex.core.scoring.reference import REFERENCE_TABLE, ReferenceTable
from neuroindex.core.scoring.standard_score import composite_z_score, format_metric_weights
from .base import (
    CombinationRule,
    IndexDefinition,
    IndexResult,
    RegionContribution,
    SignConvention,
)
from .catalog import INDEX_CATALOG, get_definition
from neuroindex.utils import get_logger
from .interpretations import classify_with_level

logger = get_logger(__name__)

DETAIL_PRECISION = 3


def _detail(value: float) -> float:
    return round_half_up(value, DETAIL_PRECISION)


class IndexEngine:
    """
    Evaluates IndexDefinitions against two hemisphere maps.

    Stateless; one instance can serve any number of subjects.
    """

    def __init__(self, reference: Optional[ReferenceTable] = None):
        self.reference = REFERENCE_TABLE if reference is None else reference

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def evaluate(
        self,
        definition: IndexDefinition,
        left: HemisphereMap,
        right: HemisphereMap,
    ) -> IndexResult:
        """Compute one index."""
        rule = definition.rule
        blend_left, blend_right = definition.hemisphere_blend or (0.5, 0.5)
        even_blend = blend_left == 0.5 and blend_right == 0.5

        total = 0.0            # ASYMMETRY / BLENDED_MEAN running sum
        sum_left = 0.0         # NORMALIZED_DIFFERENCE Σ w·zL
        sum_right = 0.0        # NORMALIZED_DIFFERENCE Σ w·zR
        strength = 0.0         # NORMALIZED_DIFFERENCE Σ w·(zL+zR)/2
        covered_weight = 0.0
        contributions: List[RegionContribution] = []

        for spec in definition.regions:
            ref = self.reference.get(spec.region)
            lh = left.get(spec.region)
            rh = right.get(spec.region)
            if ref is None or lh is None or rh is None:
                logger.debug(
                    f"IndexEngine [{definition.key}]: region '{spec.region}' unavailable, skipping"
                )
                continue

            z_left = composite_z_score(lh, ref, spec.metric_weights)
            z_right = composite_z_score(rh, ref, spec.metric_weights)
            weight = spec.weight
            covered_weight += weight

            if rule == CombinationRule.ASYMMETRY:
                if definition.sign == SignConvention.LEFT_MINUS_RIGHT:
                    total += weight * (z_left - z_right)
                else:
                    total += weight * (z_right - z_left)
                contrib_left = weight * z_left
                contrib_right = weight * z_right

            elif rule == CombinationRule.BLENDED_MEAN:
                if even_blend:
                    total += weight * ((z_left + z_right) / 2)
                else:
                    total += weight * (blend_left * z_left + blend_right * z_right)
                contrib_left = weight * blend_left * z_left
                contrib_right = weight * blend_right * z_right

            else:
                contrib_left = weight * z_left
                contrib_right = weight * z_right
                sum_left += contrib_left
                sum_right += contrib_right
                strength += (z_left + z_right) / 2 * weight

            contributions.append(RegionContribution(
                region=spec.display_name,
                region_weight=weight,
                z_left=_detail(z_left),
                z_right=_detail(z_right),
                contrib_left=_detail(contrib_left),
                contrib_right=_detail(contrib_right),
                weights_used=format_metric_weights(spec.metric_weights),
            ))

        z_score: Optional[float] = None
        if rule == CombinationRule.NORMALIZED_DIFFERENCE:
            raw = (sum_left - sum_right) / (abs(sum_left) + abs(sum_right) + definition.epsilon)
            z_score = _detail(strength)
        else:
            raw = total
            if definition.normalize_by_coverage and covered_weight > 0:
                raw = raw / covered_weight * len(definition.regions) * 0.2
            if definition.percentile_strategy != PercentileStrategy.NORMAL_CDF:
                z_score = _detail(raw)

        percentile = to_percentile(raw, definition.percentile_strategy)
        interpretation, risk_level = classify_with_level(definition.key, raw)
        if risk_level is not None:
            interpretation = f"{risk_level}. {interpretation}"

        total_weight = definition.total_weight
        coverage = covered_weight / total_weight if total_weight > 0 else 0.0

        return IndexResult(
            key=definition.key,
            name=definition.name,
            name_cn=definition.name_cn,
            category=definition.category,
            value=round_half_up(raw, definition.precision),
            percentile=percentile,
            percentile_label=percentile_label(percentile),
            interpretation=interpretation,
            coverage=coverage,
            contributions=contributions,
            risk_level=risk_level,
            z_score=z_score,
            formula=definition.formula,
            references=definition.references,
            regions=tuple(
                f"{spec.display_name} ({round_half_up(spec.weight * 100):.0f}%)"
                for spec in definition.regions
            ),
            threshold=definition.threshold,
            weights=definition.weights_text,
        )

    def evaluate_key(self, key: str, left: HemisphereMap, right: HemisphereMap) -> IndexResult:
        """Compute one index by catalog key; raises UnknownIndexError."""
        return self.evaluate(get_definition(key), left, right)

    def evaluate_all(
        self,
        left: HemisphereMap,
        right: HemisphereMap,
        definitions: Optional[Iterable[IndexDefinition]] = None,
    ) -> List[IndexResult]:
        """Compute every index (catalog order unless ``definitions`` is given)."""
        results = [
            self.evaluate(definition, left, right)
            for definition in (INDEX_CATALOG if definitions is None else definitions)
        ]
        partial = [r.key for r in results if r.coverage < 1.0]
        if partial:
            logger.debug(f"IndexEngine: {len(partial)} index(es) computed from partial data: {partial}")
        return results
