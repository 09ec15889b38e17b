"""
Index Interpretation Bands

Maps an index value to a qualitative band. Each index owns an ordered
band table; bands are tried in order and the first threshold the value
crosses wins, otherwise the fallback applies.

Direction and comparison strictness are part of each published cut-off
and differ between indices (``>=`` for handedness, ``>`` for the ability
scores, ``<=`` for the left-advantage logic/math scales, ``<`` for the
dyslexia risk scale). They are reproduced exactly.

A NaN value (malformed measurement upstream) is reported as
indeterminate rather than falling through to the last band.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from neuroindex.utils.exceptions import UnknownIndexError

INDETERMINATE = "Indeterminate: one or more contributing measurements are not numeric."


class BandDirection(str, Enum):
    DESCENDING = "descending"   # value >= / > threshold
    ASCENDING = "ascending"     # value <= / < threshold


@dataclass(frozen=True)
class Band:
    threshold: float
    text: str
    inclusive: bool = True
    level: Optional[str] = None


@dataclass(frozen=True)
class BandTable:
    direction: BandDirection
    bands: Tuple[Band, ...]
    fallback: Band

    def match(self, value: float) -> Band:
        for band in self.bands:
            if self.direction == BandDirection.DESCENDING:
                hit = value >= band.threshold if band.inclusive else value > band.threshold
            else:
                hit = value <= band.threshold if band.inclusive else value < band.threshold
            if hit:
                return band
        return self.fallback


def _desc(*bands: Band, fallback: str, fallback_level: Optional[str] = None) -> BandTable:
    return BandTable(BandDirection.DESCENDING, bands, Band(float("-inf"), fallback, level=fallback_level))


def _asc(*bands: Band, fallback: str, fallback_level: Optional[str] = None) -> BandTable:
    return BandTable(BandDirection.ASCENDING, bands, Band(float("inf"), fallback, level=fallback_level))


# ── Basic lateralization ──────────────────────────────────────────────────────

HANDEDNESS_BANDS = _desc(
    Band(1.28, "Extreme right-hander (top 10% of people). The motor cortex shows a very strong "
               "left-hemisphere advantage; fine motor control of the right hand stands out."),
    Band(0.84, "Strong right-hander (top 20%). Clear left-hemisphere motor dominance, the typical "
               "structure of a right-handed person."),
    Band(0.52, "Moderate right-hander (top 30%). The left motor cortex leads; the right hand is "
               "preferred for everyday tasks."),
    Band(-0.52, "Ambidextrous / mixed (about 60% of people, most common). The motor cortex is highly "
                "symmetric; good two-handed coordination or mixed handedness is likely."),
    Band(-0.84, "Moderate left-hander (bottom 30%). The right motor cortex leads; the left hand is "
                "preferred for everyday tasks."),
    fallback="Strong left-hander (bottom 10%). Clear right-hemisphere motor dominance, the typical "
             "structure of a left-handed person.",
)

DOMINANT_EYE_BANDS = _desc(
    Band(1.5, "Extreme right-eye dominance (about 4-6% of people, 95%+ confidence). The left visual "
              "cortex is markedly larger; the right eye leads in visual tasks."),
    Band(0.8, "Clear right-eye dominance (about 18-22%). The left visual cortex leads; the right eye "
              "is sharper in fine visual tasks."),
    Band(0.3, "Mild right-eye preference (about 25-30%). The left visual cortex is slightly larger."),
    Band(-0.3, "Balanced eyes (about 35-40%, most common). The visual cortex is symmetric with no "
               "dominant eye."),
    Band(-0.8, "Mild left-eye preference (about 12-15%). The right visual cortex is slightly larger."),
    fallback="Clear to extreme left-eye dominance (about 5-7%). The right visual cortex leads; the "
             "left eye dominates visual tasks.",
)

NOSTRIL_BANDS = _desc(
    Band(1.2, "Extreme right-nostril preference (top 5%): you smell perfume with the right side."),
    Band(0.7, "Clear right-nostril preference: the right nostril is keener when eating."),
    Band(0.3, "Mild right-nostril preference: you unconsciously favour the right side."),
    Band(-0.3, "Balanced nostrils: a free two-nostril smeller.", inclusive=False),
    Band(-0.7, "Mild left-nostril preference.", inclusive=False),
    Band(-1.2, "Clear left-nostril preference.", inclusive=False),
    fallback="Extreme left-nostril preference (bottom 5%): possibly a left-sided taste expert.",
)

LANGUAGE_LATERALIZATION_BANDS = _desc(
    Band(0.20, "Typical left lateralization (most common pattern, about 85% of people)."),
    Band(0.05, "Weak left lateralization (about 10% of people)."),
    Band(-0.05, "Bilateral (rare pattern, about 3% of people)."),
    Band(-0.15, "Weak right lateralization (about 1.5% of people)."),
    fallback="Marked right lateralization (<0.5% of people).",
)

# ── Advanced lateralization ───────────────────────────────────────────────────

SPATIAL_ATTENTION_BANDS = _desc(
    Band(0.80, "Extreme right bias (top 5%). The right parietal attention network dominates; "
               "attention is strongly drawn to the left visual field."),
    Band(0.40, "Clear right bias (top 15%). The typical right-hemisphere spatial advantage; "
               "attention leans toward the left visual field."),
    Band(-0.20, "Balanced / mild right bias. Attention is distributed symmetrically across both fields."),
    Band(-0.40, "Mild left bias. The left parietal lobe leads slightly; attention may favour the right field."),
    fallback="Clear left bias (uncommon). Atypical left-parietal dominance; attention favours the right field.",
)

EMOTION_BANDS = _desc(
    Band(0.90, "Extreme right bias (top 8%). The right emotion network dominates; negative emotions "
               "such as fear and sadness may be perceived more keenly."),
    Band(0.50, "Clear right bias. Right insula and orbitofrontal cortex lead, matching the classic "
               "right-hemisphere emotion hypothesis."),
    Band(-0.30, "Balanced. Positive and negative emotion processing are symmetric."),
    Band(-0.50, "Mild left bias. The left emotion network leads slightly; positive emotions may be more salient."),
    fallback="Clear left bias (associated with low-mood tendencies). Research links this pattern with "
             "depressive tendencies; keep an eye on emotional health.",
)

FACE_RECOGNITION_BANDS = _desc(
    Band(1.00, "Extreme right bias (top 3%). A highly developed right fusiform face area; face "
               "recognition is likely outstanding."),
    Band(0.60, "Clear right bias (top 10%). The typical right-hemisphere face advantage with good face memory."),
    Band(-0.20, "Balanced. Face recognition networks are symmetric and within the normal range."),
    Band(-0.60, "Mild left bias (less common). Possibly more analytic, feature-based face processing."),
    fallback="Clear left bias (rare). An atypical pattern that may relate to face recognition difficulty.",
)

MUSIC_BANDS = _desc(
    Band(1.20, "Extreme right bias (top 1%). A highly developed right auditory cortex; melody, pitch "
               "and timbre perception may be exceptionally keen."),
    Band(0.70, "Clear right bias (top 8%). The typical right-hemisphere music advantage with good "
               "melody and rhythm perception."),
    Band(-0.30, "Balanced. Music perception networks are symmetric and within the normal range."),
    Band(-0.70, "Mild left bias. Possibly stronger rhythmic and temporal processing of music."),
    fallback="Clear left bias (rare). An atypical left auditory dominance.",
)

THEORY_OF_MIND_BANDS = _desc(
    Band(0.80, "Extreme right bias (top 8%). Highly developed right temporo-parietal junction and "
               "angular gyrus; mentalizing is likely outstanding."),
    Band(0.40, "Clear right bias (top 20%). The typical right-hemisphere social-cognition advantage "
               "with good social intuition."),
    Band(-0.20, "Balanced. Theory-of-mind networks are symmetric and within the normal range."),
    Band(-0.40, "Mild left bias. Possibly stronger language-based reasoning about other minds."),
    fallback="Clear left bias. An atypical left theory-of-mind dominance.",
)

LOGICAL_REASONING_BANDS = _asc(
    Band(-0.80, "Extreme left-brain advantage (top 1%). Left prefrontal and parietal cortex are highly "
                "developed; abstract reasoning and rule integration are exceptional."),
    Band(-0.50, "Marked left-brain advantage (top 5%). The left executive network leads; deductive "
                "reasoning and problem solving are well above average."),
    Band(-0.20, "Mild left-brain preference (top 20%). The typical left-hemisphere logic advantage "
                "with good analytic reasoning."),
    Band(0.20, "Balanced / mild right bias (most common, 50%). Analytic and spatial reasoning styles "
               "are both available."),
    Band(0.50, "Right-brain advantage (bottom 10%). Possibly stronger spatial and holistic reasoning."),
    fallback="Marked right-brain advantage (rare). An atypical pattern with a distinctive "
             "spatial-logical integration.",
)

MATHEMATICAL_ABILITY_BANDS = _asc(
    Band(-0.90, "Extreme left-brain advantage (top 1%). The left intraparietal number system is highly "
                "developed; numerical intuition and arithmetic are exceptional."),
    Band(-0.60, "Marked left-brain advantage (top 3%). Left parietal-frontal maths network leads; "
                "symbolic and algebraic work are well above average."),
    Band(-0.20, "Mild left-brain preference (top 15%). The typical left-hemisphere maths advantage "
                "with good arithmetic and algebra."),
    Band(0.20, "Balanced / mild right bias (most common, 60%). Algebraic and geometric thinking are "
               "both available."),
    Band(0.40, "Right-brain advantage (bottom 10%). Possibly stronger spatial maths and geometric reasoning."),
    fallback="Marked right-brain advantage (rare). An atypical pattern with a distinctive "
             "spatial-mathematical integration.",
)

# ── Perception, language & cognition ──────────────────────────────────────────

OLFACTORY_BANDS = _desc(
    Band(1.5, "Excellent olfactory function (top 7%). Olfactory cortex is well developed; keen smell "
              "discrimination is likely.", inclusive=False),
    Band(1.0, "Good olfactory function (top 16%). Above-average olfactory perception.", inclusive=False),
    Band(-0.5, "Normal olfactory function. Olfactory cortex is within the normal range.", inclusive=False),
    fallback="Olfactory function needs attention. Olfactory cortex is small; keep an eye on smell health.",
)

LANGUAGE_COMPOSITE_BANDS = _desc(
    Band(2.4, "Exceptional language ability (top 0.7%). Language cortex is highly developed; "
              "comprehension, expression and learning are likely outstanding.", inclusive=False),
    Band(2.0, "Excellent language ability (top 2.5%). Broca's and Wernicke's areas are well developed.",
         inclusive=False),
    Band(1.0, "Good language ability (top 16%). Above-average comprehension and expression.", inclusive=False),
    Band(-0.5, "Normal language ability. Language cortex is within the normal range.", inclusive=False),
    fallback="Language ability needs attention. Language cortex is relatively weak; language "
             "training can help.",
)

READING_FLUENCY_BANDS = _desc(
    Band(2.0, "Excellent reading ability (top 2.5%). Visual word-form and phonological areas are well "
              "developed; fast reading is likely.", inclusive=False),
    Band(1.0, "Good reading ability (top 16%). Reading fluency is above average.", inclusive=False),
    Band(-0.5, "Normal reading ability. Reading cortex is within the normal range.", inclusive=False),
    fallback="Reading ability needs attention. Reading cortex is relatively weak; reading training can help.",
)

DYSLEXIA_BANDS = _asc(
    Band(-1.0, "Elevated structural dyslexia risk. Left reading cortex (superior temporal, fusiform, "
               "inferior parietal, supramarginal, middle temporal) is clearly smaller than the right. "
               "This under-lateralized pattern is linked to the neural basis of dyslexia; a professional "
               "reading assessment is recommended.", inclusive=False, level="High risk"),
    Band(-0.5, "Moderate structural dyslexia risk. Left reading cortex is slightly smaller than the "
               "right; monitor reading development and train targeted skills if needed.",
         inclusive=False, level="Moderate risk"),
    Band(0.5, "Low structural dyslexia risk. Reading cortex is balanced between hemispheres with a "
              "normal left lateralization.", inclusive=False, level="Low risk"),
    fallback="Very low structural dyslexia risk. Left reading cortex is well developed with the typical "
             "left advantage that supports reading.",
    fallback_level="Very low risk",
)

EMPATHY_BANDS = _desc(
    Band(1.6, "Excellent empathy (top 5%). Anterior cingulate and insula are well developed; emotional "
              "perception and empathy are likely outstanding.", inclusive=False),
    Band(1.5, "Good empathy (top 7%). Above-average emotional understanding and social cognition.",
         inclusive=False),
    Band(0.5, "Above-average empathy. Empathy-related cortex is well developed.", inclusive=False),
    Band(-0.5, "Normal empathy. Empathy-related cortex is within the normal range.", inclusive=False),
    fallback="Empathy needs attention. Empathy-related cortex is relatively weak; social training can help.",
)

EXECUTIVE_FUNCTION_BANDS = _desc(
    Band(1.9, "Exceptional executive function (top 3%). Prefrontal cortex is highly developed; planning, "
              "decision making and working memory are likely outstanding.", inclusive=False),
    Band(1.8, "Excellent executive function (top 4%). Prefrontal cortex is well developed.", inclusive=False),
    Band(1.0, "Good executive function (top 16%). Planning and decision making are above average.",
         inclusive=False),
    Band(-0.5, "Normal executive function. Prefrontal cortex is within the normal range.", inclusive=False),
    fallback="Executive function needs attention. Prefrontal cortex is relatively weak; cognitive "
             "training can help.",
)

SPATIAL_PROCESSING_BANDS = _desc(
    Band(1.5, "Excellent spatial ability (top 7%). Parietal cortex is highly developed; mental rotation "
              "and navigation are likely outstanding.", inclusive=False),
    Band(1.2, "Good spatial ability (top 11%). Spatial processing is above average.", inclusive=False),
    Band(0.5, "Above-average spatial ability. Parietal cortex is well developed.", inclusive=False),
    Band(-0.5, "Normal spatial ability. Parietal cortex is within the normal range.", inclusive=False),
    fallback="Spatial ability needs attention. Parietal cortex is relatively weak; spatial training can help.",
)

FLUID_INTELLIGENCE_BANDS = _desc(
    Band(2.1, "Exceptional structural fluid-intelligence estimate (top 1.8%). Several cognition-related "
              "regions are highly developed. This is the ceiling a structural measure can reach.",
         inclusive=False),
    Band(2.0, "Excellent structural fluid-intelligence estimate (top 2.5%).", inclusive=False),
    Band(1.5, "Good structural fluid-intelligence estimate (top 7%).", inclusive=False),
    Band(0.5, "Above-average structural fluid-intelligence estimate.", inclusive=False),
    Band(-0.5, "Normal structural fluid-intelligence estimate.", inclusive=False),
    fallback="Structural fluid-intelligence estimate needs attention; cognitive training can help.",
)


BAND_TABLES: Dict[str, BandTable] = {
    "handedness": HANDEDNESS_BANDS,
    "dominant_eye": DOMINANT_EYE_BANDS,
    "preferred_nostril": NOSTRIL_BANDS,
    "language_lateralization": LANGUAGE_LATERALIZATION_BANDS,
    "spatial_attention_lateralization": SPATIAL_ATTENTION_BANDS,
    "emotion_lateralization": EMOTION_BANDS,
    "face_recognition_lateralization": FACE_RECOGNITION_BANDS,
    "music_lateralization": MUSIC_BANDS,
    "theory_of_mind_lateralization": THEORY_OF_MIND_BANDS,
    "logical_reasoning_lateralization": LOGICAL_REASONING_BANDS,
    "mathematical_ability_lateralization": MATHEMATICAL_ABILITY_BANDS,
    "olfactory": OLFACTORY_BANDS,
    "language_composite": LANGUAGE_COMPOSITE_BANDS,
    "reading_fluency": READING_FLUENCY_BANDS,
    "dyslexia_risk": DYSLEXIA_BANDS,
    "empathy": EMPATHY_BANDS,
    "executive_function": EXECUTIVE_FUNCTION_BANDS,
    "spatial_processing": SPATIAL_PROCESSING_BANDS,
    "fluid_intelligence": FLUID_INTELLIGENCE_BANDS,
}


def classify_with_level(key: str, value: float) -> Tuple[str, Optional[str]]:
    """Return (band text, risk level or None) for an index value."""
    table = BAND_TABLES.get(key)
    if table is None:
        raise UnknownIndexError(key)
    if math.isnan(value):
        return INDETERMINATE, None
    band = table.match(value)
    return band.text, band.level


def classify(key: str, value: float) -> str:
    """Band text for an index value."""
    return classify_with_level(key, value)[0]
