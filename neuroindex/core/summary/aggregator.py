"""
Summary Aggregator

Scans the full list of IndexResults and derives the report summary: top
strengths, special features, recommendations and an overall ability score.

Every rule looks its index up by key, so the summary does not depend on the
order the indices were evaluated in.

Usage:
    from neuroindex.core.summary import summarize

    summary = summarize(results)
    print(summary.top_strengths, summary.overall_score)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from neuroindex.core.indices.base import IndexResult
from neuroindex.core.scoring.percentile import round_half_up
from neuroindex.utils import get_logger

logger = get_logger(__name__)

# ── Thresholds ───────────────────────────────────────────────────────────────
STRENGTH_PERCENTILE = 84
MAX_STRENGTHS = 5
VERY_HIGH_PERCENTILE = 95
LOW_PERCENTILE = 20
APTITUDE_PERCENTILE = 90
MUSIC_APTITUDE_PERCENTILE = 92

DEFAULT_RECOMMENDATION = (
    "All indices are within the normal range; keep a balanced development."
)

# Ability indices feeding the overall score (weights sum to 1.0)
OVERALL_WEIGHTS: Dict[str, float] = {
    "olfactory":           0.08,
    "language_composite":  0.15,
    "reading_fluency":     0.12,
    "empathy":             0.12,
    "executive_function":  0.18,
    "spatial_processing":  0.15,
    "fluid_intelligence":  0.20,
    "dyslexia_risk":       0.10,
}
OVERALL_DEFAULT_SCORE = 75


@dataclass(frozen=True)
class AnalysisSummary:
    top_strengths: List[str] = field(default_factory=list)
    special_features: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    overall_score: int = OVERALL_DEFAULT_SCORE
    overall_label: str = "Good"

    def to_dict(self) -> dict:
        return {
            "top_strengths": list(self.top_strengths),
            "special_features": list(self.special_features),
            "recommendations": list(self.recommendations),
            "overall_score": self.overall_score,
            "overall_label": self.overall_label,
        }


def _percentile_at_least(result: Optional[IndexResult], threshold: float) -> bool:
    return result is not None and result.percentile is not None and result.percentile >= threshold


def overall_label(score: float) -> str:
    if score >= 85:
        return "Excellent"
    if score >= 70:
        return "Good"
    if score >= 50:
        return "Normal"
    if score >= 30:
        return "Low"
    return "Needs attention"


def _map_percentile_to_score(percentile: float) -> float:
    if percentile >= 84:
        return 90 + (percentile - 84) * 10 / 16
    if percentile >= 50:
        return 75 + (percentile - 50) * 15 / 34
    if percentile >= 16:
        return 60 + (percentile - 16) * 15 / 34
    return 40 + percentile * 20 / 16


class SummaryAggregator:
    """
    Pure function object over a list of IndexResults.

    Results whose percentile is None (NaN input) are ignored by every
    percentile-driven rule; value-driven rules compare NaN as False.
    """

    def summarize(self, results: Iterable[IndexResult]) -> AnalysisSummary:
        results = list(results)
        by_key = {r.key: r for r in results}
        score = self.overall_score(by_key)
        return AnalysisSummary(
            top_strengths=self.top_strengths(results),
            special_features=self.special_features(by_key),
            recommendations=self.recommendations(results, by_key),
            overall_score=score,
            overall_label=overall_label(score),
        )

    # ------------------------------------------------------------------
    # Top strengths
    # ------------------------------------------------------------------

    @staticmethod
    def top_strengths(results: List[IndexResult]) -> List[str]:
        strong = [r for r in results if _percentile_at_least(r, STRENGTH_PERCENTILE)]
        strong.sort(key=lambda r: r.percentile, reverse=True)
        return [f"{r.name} (top {100 - r.percentile}%)" for r in strong[:MAX_STRENGTHS]]

    # ------------------------------------------------------------------
    # Special features
    # ------------------------------------------------------------------

    @staticmethod
    def special_features(by_key: Dict[str, IndexResult]) -> List[str]:
        features: List[str] = []

        handedness = by_key.get("handedness")
        if handedness:
            if handedness.value < -0.84:
                features.append("Left-handed trait (bottom 10% of the population)")
            elif handedness.value >= 1.28:
                features.append("Strongly right-handed (top 10% of the population)")

        eye = by_key.get("dominant_eye")
        if eye and abs(eye.value) >= 1.5:
            features.append(
                "Extreme right-eye dominance" if eye.value > 0 else "Extreme left-eye dominance"
            )

        nostril = by_key.get("preferred_nostril")
        if nostril and abs(nostril.value) >= 1.2:
            features.append(
                "Extreme right-nostril preference" if nostril.value > 0
                else "Extreme left-nostril preference"
            )

        lang_lat = by_key.get("language_lateralization")
        if lang_lat:
            if lang_lat.value < -0.15:
                features.append("Marked right-hemisphere language lateralization (<0.5% of people, very rare)")
            elif -0.05 <= lang_lat.value <= 0.05 and lang_lat.has_signal:
                features.append("Bilateral language representation (about 3% of people)")

        spatial_attn = by_key.get("spatial_attention_lateralization")
        if spatial_attn and spatial_attn.value >= 0.80:
            features.append("Very strong right-hemisphere spatial attention (top 5%)")

        emotion = by_key.get("emotion_lateralization")
        if emotion:
            if emotion.value >= 0.90:
                features.append("Very strong right-hemisphere emotion processing (top 8%)")
            elif emotion.value <= -0.50:
                features.append("Left-hemisphere emotion dominance (possibly linked to low mood; worth monitoring)")

        face = by_key.get("face_recognition_lateralization")
        if face and face.value >= 1.00:
            features.append("Very strong face recognition (top 3%)")

        music = by_key.get("music_lateralization")
        if music and music.value >= 1.20:
            features.append("Very strong musical perception (top 1%)")

        tom = by_key.get("theory_of_mind_lateralization")
        if tom and tom.value >= 0.80:
            features.append("Very strong mentalizing ability (top 8%)")

        dyslexia = by_key.get("dyslexia_risk")
        if dyslexia:
            if dyslexia.value < -1.0:
                features.append("High structural dyslexia risk; professional assessment advised")
            elif dyslexia.value < -0.5:
                features.append("Moderate structural dyslexia risk; worth monitoring")

        if _percentile_at_least(by_key.get("language_composite"), 99):
            features.append("Outstanding language ability (top 1%)")
        if _percentile_at_least(by_key.get("fluid_intelligence"), 98):
            features.append("Outstanding fluid intelligence structure (top 2%)")

        logic = by_key.get("logical_reasoning_lateralization")
        if logic:
            if logic.value <= -0.80:
                features.append("Exceptional logical reasoning aptitude (top 1%, left-hemisphere)")
            elif logic.value <= -0.50:
                features.append("Marked logical reasoning ability (top 5%, left-hemisphere)")

        math = by_key.get("mathematical_ability_lateralization")
        if math:
            if math.value <= -0.90:
                features.append("Exceptional mathematical aptitude (top 1%, left-hemisphere)")
            elif math.value <= -0.60:
                features.append("Marked mathematical ability (top 3%, left-hemisphere)")

        return features

    # ------------------------------------------------------------------
    # Recommendations
    # ------------------------------------------------------------------

    @staticmethod
    def recommendations(results: List[IndexResult], by_key: Dict[str, IndexResult]) -> List[str]:
        recs: List[str] = []

        very_high = [r.name for r in results if _percentile_at_least(r, VERY_HIGH_PERCENTILE)]
        if very_high:
            recs.append(
                f"You perform exceptionally in {', '.join(very_high)}; "
                "consider developing these areas further."
            )

        low = [r.name for r in results if r.percentile is not None and r.percentile < LOW_PERCENTILE]
        if low:
            recs.append(f"{', '.join(low)} are relatively weak and can improve with targeted training.")

        if _percentile_at_least(by_key.get("language_composite"), APTITUDE_PERCENTILE):
            recs.append("Well suited to language-intensive work such as linguistics, translation, writing or teaching.")
        if _percentile_at_least(by_key.get("reading_fluency"), APTITUDE_PERCENTILE):
            recs.append("Excellent reading ability; suited to academic research and literature analysis.")
        if _percentile_at_least(by_key.get("spatial_processing"), APTITUDE_PERCENTILE):
            recs.append("Strong spatial ability; suited to architecture, engineering and 3D modelling.")
        if _percentile_at_least(by_key.get("empathy"), APTITUDE_PERCENTILE):
            recs.append("Excellent empathy; suited to counselling, social work and human resources.")
        if _percentile_at_least(by_key.get("executive_function"), APTITUDE_PERCENTILE):
            recs.append("Strong executive function; suited to management, strategic planning and project management.")

        music = by_key.get("music_lateralization")
        if _percentile_at_least(music, MUSIC_APTITUDE_PERCENTILE):
            recs.append("Musical perception talent; consider music-related study or career paths.")

        face = by_key.get("face_recognition_lateralization")
        if _percentile_at_least(face, APTITUDE_PERCENTILE):
            recs.append("Strong face recognition; suited to roles that need fast recognition of people.")

        logic = by_key.get("logical_reasoning_lateralization")
        if logic and logic.value <= -0.50:
            recs.append("Strong logical reasoning; suited to mathematics, programming, philosophy or law.")

        math = by_key.get("mathematical_ability_lateralization")
        if math and math.value <= -0.60:
            recs.append("Outstanding numerical ability; suited to mathematics, physics, engineering or data science.")
        elif math and math.value >= 0.40:
            recs.append("Strong spatial mathematics; suited to geometry, topology or architectural design.")

        dyslexia = by_key.get("dyslexia_risk")
        if dyslexia and dyslexia.value < -0.5:
            recs.append("A professional reading assessment is advised, with reading intervention if needed.")

        emotion = by_key.get("emotion_lateralization")
        if emotion and emotion.value <= -0.50:
            recs.append("Keep an eye on emotional wellbeing and seek counselling support if needed.")

        if not recs:
            recs.append(DEFAULT_RECOMMENDATION)
        return recs

    # ------------------------------------------------------------------
    # Overall score
    # ------------------------------------------------------------------

    @staticmethod
    def overall_score(by_key: Dict[str, IndexResult]) -> int:
        """Weighted ability percentile mapped onto a 0-100 score."""
        weighted = 0.0
        total_weight = 0.0
        for key, weight in OVERALL_WEIGHTS.items():
            result = by_key.get(key)
            if result is None or result.percentile is None:
                continue
            weighted += result.percentile * weight
            total_weight += weight

        if total_weight == 0:
            logger.debug("SummaryAggregator: no ability index available, using default overall score")
            return OVERALL_DEFAULT_SCORE

        score = round_half_up(_map_percentile_to_score(weighted / total_weight))
        return int(max(0, min(100, score)))


_AGGREGATOR = SummaryAggregator()


def summarize(results: Iterable[IndexResult]) -> AnalysisSummary:
    """Module-level convenience wrapper around SummaryAggregator."""
    return _AGGREGATOR.summarize(results)
