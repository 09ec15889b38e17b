"""
Unit Tests for the Summary Aggregator

Tests for top strengths, special features, recommendations and the overall
score, driven by hand-built IndexResults.
"""
import logging
from typing import Optional

import pytest

from neuroindex.core.indices import INDEX_CATALOG, IndexResult, RegionContribution
from neuroindex.core.summary import (
    DEFAULT_RECOMMENDATION,
    SummaryAggregator,
    overall_label,
    summarize,
)


def _result(key: str, value: float = 0.0, percentile: Optional[int] = 50, signal: bool = False) -> IndexResult:
    definition = next(d for d in INDEX_CATALOG if d.key == key)
    contributions = [RegionContribution("r", 1.0, 0.1, 0.0, 0.1, 0.0, "60:30:10")] if signal else []
    return IndexResult(
        key=key,
        name=definition.name,
        name_cn=definition.name_cn,
        category=definition.category,
        value=value,
        percentile=percentile,
        percentile_label="",
        interpretation="",
        coverage=1.0,
        contributions=contributions,
    )


def _baseline(**overrides) -> list:
    """One neutral result per catalog index, with selected replacements."""
    return [overrides.get(d.key, _result(d.key)) for d in INDEX_CATALOG]


class TestTopStrengths:
    """Tests for top strengths."""

    def test_none_at_baseline(self):
        assert summarize(_baseline()).top_strengths == []

    def test_sorted_and_capped(self):
        """At most five, highest percentile first."""
        keys = ["handedness", "dominant_eye", "olfactory", "empathy",
                "executive_function", "spatial_processing", "fluid_intelligence"]
        percentiles = [85, 99, 90, 84, 97, 88, 93]
        overrides = {k: _result(k, percentile=p) for k, p in zip(keys, percentiles)}
        strengths = summarize(_baseline(**overrides)).top_strengths

        assert len(strengths) == 5
        assert strengths[0] == "Dominant Eye Index (top 1%)"
        assert strengths[1].startswith("Executive Function Index")
        assert all("Empathy" not in s for s in strengths)

    def test_order_independent(self):
        """Shuffling the input does not change rule outcomes."""
        results = _baseline(
            music_lateralization=_result("music_lateralization", value=1.3, percentile=96),
            dyslexia_risk=_result("dyslexia_risk", value=-1.2, percentile=8),
        )
        forward = summarize(results)
        backward = summarize(list(reversed(results)))

        assert forward.special_features == backward.special_features
        assert set(forward.recommendations) == set(backward.recommendations)


class TestSpecialFeatures:
    """Tests for special feature triggers."""

    def test_none_at_baseline(self):
        assert summarize(_baseline()).special_features == []

    def test_handedness(self):
        left = summarize(_baseline(handedness=_result("handedness", value=-0.9)))
        right = summarize(_baseline(handedness=_result("handedness", value=1.28)))

        assert left.special_features == ["Left-handed trait (bottom 10% of the population)"]
        assert right.special_features == ["Strongly right-handed (top 10% of the population)"]

    def test_eye_and_nostril_direction(self):
        summary = summarize(_baseline(
            dominant_eye=_result("dominant_eye", value=-1.6),
            preferred_nostril=_result("preferred_nostril", value=1.2),
        ))
        assert summary.special_features == [
            "Extreme left-eye dominance",
            "Extreme right-nostril preference",
        ]

    def test_bilateral_language_needs_signal(self):
        """Near-zero lateralization only counts when regions deviated."""
        flat = summarize(_baseline(language_lateralization=_result("language_lateralization", value=0.0)))
        real = summarize(_baseline(
            language_lateralization=_result("language_lateralization", value=0.03, signal=True)
        ))

        assert flat.special_features == []
        assert real.special_features == ["Bilateral language representation (about 3% of people)"]

    def test_dyslexia_tiers(self):
        high = summarize(_baseline(dyslexia_risk=_result("dyslexia_risk", value=-1.1)))
        moderate = summarize(_baseline(dyslexia_risk=_result("dyslexia_risk", value=-0.6)))

        assert high.special_features[0].startswith("High structural dyslexia risk")
        assert moderate.special_features[0].startswith("Moderate structural dyslexia risk")

    def test_percentile_driven(self):
        summary = summarize(_baseline(
            language_composite=_result("language_composite", percentile=99),
            fluid_intelligence=_result("fluid_intelligence", percentile=98),
        ))
        assert "Outstanding language ability (top 1%)" in summary.special_features
        assert "Outstanding fluid intelligence structure (top 2%)" in summary.special_features

    def test_logic_and_math_tiers(self):
        summary = summarize(_baseline(
            logical_reasoning_lateralization=_result("logical_reasoning_lateralization", value=-0.6),
            mathematical_ability_lateralization=_result("mathematical_ability_lateralization", value=-0.95),
        ))
        assert summary.special_features == [
            "Marked logical reasoning ability (top 5%, left-hemisphere)",
            "Exceptional mathematical aptitude (top 1%, left-hemisphere)",
        ]


class TestRecommendations:
    """Tests for recommendations."""

    def test_default_when_nothing_fires(self):
        """All-50 input yields only the balanced development message."""
        assert summarize(_baseline()).recommendations == [DEFAULT_RECOMMENDATION]

    def test_never_empty(self):
        assert summarize([]).recommendations == [DEFAULT_RECOMMENDATION]

    def test_aggregate_strengths_and_weaknesses(self):
        summary = summarize(_baseline(
            empathy=_result("empathy", percentile=96),
            olfactory=_result("olfactory", percentile=10),
        ))
        recs = summary.recommendations

        assert recs[0].startswith("You perform exceptionally in Empathy Index")
        assert recs[1].startswith("Olfactory Function Index are relatively weak")
        assert any("counselling, social work" in r for r in recs)

    def test_math_spatial_branch(self):
        summary = summarize(_baseline(
            mathematical_ability_lateralization=_result("mathematical_ability_lateralization", value=0.45),
        ))
        assert summary.recommendations == [
            "Strong spatial mathematics; suited to geometry, topology or architectural design."
        ]

    def test_music_threshold(self):
        """Music needs the 92nd percentile, not the 90th."""
        at_90 = summarize(_baseline(music_lateralization=_result("music_lateralization", percentile=91)))
        at_92 = summarize(_baseline(music_lateralization=_result("music_lateralization", percentile=92)))

        assert at_90.recommendations == [DEFAULT_RECOMMENDATION]
        assert any("Musical perception" in r for r in at_92.recommendations)

    def test_none_percentile_ignored(self):
        """Indeterminate results do not trigger percentile rules."""
        summary = summarize(_baseline(empathy=_result("empathy", value=float("nan"), percentile=None)))

        assert summary.top_strengths == []
        assert summary.special_features == []
        assert summary.recommendations == [DEFAULT_RECOMMENDATION]


class TestOverallScore:
    """Tests for the overall ability score."""

    def test_baseline_score(self):
        """Percentile 50 everywhere maps to 75."""
        summary = summarize(_baseline())
        assert summary.overall_score == 75
        assert summary.overall_label == "Good"

    def test_default_without_ability_indices(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="neuroindex.core.summary.aggregator"):
            assert SummaryAggregator.overall_score({}) == 75

        assert any(
            r.name == "neuroindex.core.summary.aggregator" and "default overall score" in r.getMessage()
            for r in caplog.records
        )

    def test_high_percentiles(self):
        keys = ["olfactory", "language_composite", "reading_fluency", "empathy",
                "executive_function", "spatial_processing", "fluid_intelligence", "dyslexia_risk"]
        summary = summarize(_baseline(**{k: _result(k, percentile=99) for k in keys}))

        assert summary.overall_score == 99
        assert summary.overall_label == "Excellent"

    def test_low_percentiles(self):
        keys = ["olfactory", "language_composite", "reading_fluency", "empathy",
                "executive_function", "spatial_processing", "fluid_intelligence", "dyslexia_risk"]
        summary = summarize(_baseline(**{k: _result(k, percentile=8) for k in keys}))

        assert summary.overall_score == 50
        assert summary.overall_label == "Normal"

    @pytest.mark.parametrize("score,label", [
        (85, "Excellent"), (70, "Good"), (50, "Normal"), (30, "Low"), (29, "Needs attention"),
    ])
    def test_labels(self, score, label):
        assert overall_label(score) == label

    def test_to_dict(self):
        d = summarize(_baseline()).to_dict()
        assert set(d) == {"top_strengths", "special_features", "recommendations", "overall_score", "overall_label"}
