"""
Structural Index Catalog

The 19 index definitions evaluated for every subject, in report order.

Every number below (region weights, metric triples, blend ratios, rounding
precision) is part of the published formula of its index and must be
reproduced exactly. Region weights are NOT normalised: most sum to 1.0, the
nostril index sums to 1.0 only because its piriform proxy re-uses the
entorhinal data, and the dyslexia index is re-scaled after the sum.

Metric triples are (thickness, surface area, volume) percentages.

References are listed per index; see the module docstrings of
``interpretations`` for the band thresholds.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from neuroindex.core.scoring.percentile import PercentileStrategy
from neuroindex.utils.exceptions import UnknownIndexError
from .base import (
    CombinationRule,
    IndexCategory,
    IndexDefinition,
    RegionSpec,
    SignConvention,
)


def _uniform(metric_weights: Tuple[float, float, float], *regions: Tuple[str, float]) -> Tuple[RegionSpec, ...]:
    """Region specs sharing one metric-weight triple."""
    return tuple(RegionSpec(name, weight, metric_weights) for name, weight in regions)


# ── Basic lateralization (0-3) ────────────────────────────────────────────────

HANDEDNESS = IndexDefinition(
    key="handedness",
    name="Handedness Index",
    name_cn="惯用手指数",
    category=IndexCategory.BASIC_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.LEFT_MINUS_RIGHT,   # positive = left motor cortex = right hand
    precision=3,
    regions=_uniform(
        (60, 30, 10),
        ("precentral", 0.55),
        ("postcentral", 0.25),
        ("paracentral", 0.20),
    ),
    formula="LI_hand = Σ[w × (z_L − z_R)]",
    references=("Sha 2024 Nat Commun", "Wiberg 2019 PNAS", "UKBB 2024"),
    threshold=(
        "≥+1.28 extreme right-hander (top 10%); ≥+0.84 strong right-hander (top 20%); "
        "≥+0.52 moderate right-hander (top 30%); ±0.52 ambidextrous (60%); "
        "≤-0.84 left-hander (bottom 10%)"
    ),
    weights_text="thickness 60 : surface area 30 : volume 10",
)

DOMINANT_EYE = IndexDefinition(
    key="dominant_eye",
    name="Dominant Eye Index",
    name_cn="主视眼指数",
    category=IndexCategory.BASIC_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.LEFT_MINUS_RIGHT,   # positive = right eye
    precision=3,
    regions=_uniform(
        (92, 4, 4),
        ("pericalcarine", 0.70),
        ("cuneus", 0.15),
        ("lingual", 0.15),
    ),
    formula="LI_eye = Σ[w × (z_L − z_R)]",
    references=("Hayat 2022 Neuroimage", "Jensen 2015", "HCP 2024"),
    threshold=(
        "≥+1.5 extreme right eye (4-6%); +0.8~+1.5 clear right eye (18-22%); "
        "+0.3~+0.8 mild right eye (25-30%); ±0.3 balanced (35-40%); "
        "-0.8~-0.3 mild left eye (12-15%); ≤-0.8 clear left eye (5-7%)"
    ),
    weights_text="thickness 92 : surface area 4 : volume 4",
)

PREFERRED_NOSTRIL = IndexDefinition(
    key="preferred_nostril",
    name="Preferred Nostril Index",
    name_cn="主嗅鼻孔指数",
    category=IndexCategory.BASIC_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,   # positive = right nostril
    precision=3,
    percentile_strategy=PercentileStrategy.LINEAR,
    regions=(
        RegionSpec("entorhinal", 0.45, (70, 20, 10), "entorhinal (olfactory cortex)"),
        RegionSpec("parahippocampal", 0.20, (70, 20, 10)),
        RegionSpec("medialorbitofrontal", 0.20, (70, 20, 10), "medialorbitofrontal (olfactory reward)"),
        RegionSpec("insula", 0.10, (70, 20, 10), "insula (olfactory integration)"),
        # The DKT atlas has no piriform cortex; entorhinal stands in for it.
        RegionSpec("entorhinal", 0.05, (70, 20, 10), "piriform (entorhinal proxy)"),
    ),
    formula="OLI = Σwᵢ×(zRᵢ − zLᵢ)  positive = right nostril",
    references=(
        "ENIGMA-Olfaction 2024 (n>8,200)",
        "Zatorre et al. 2023 Chem Senses",
        "Frasnelli 2022 Physiol Rev meta",
    ),
    threshold="> +0.7 clear right nostril | < -0.7 clear left nostril | ±0.3 balanced",
    weights_text="thickness 70% : surface area 20% : volume 10% (olfaction tracks thickness)",
)

LANGUAGE_LATERALIZATION = IndexDefinition(
    key="language_lateralization",
    name="Language Lateralization Index",
    name_cn="语言偏侧化指数",
    category=IndexCategory.BASIC_LATERALIZATION,
    rule=CombinationRule.NORMALIZED_DIFFERENCE,
    precision=3,
    percentile_strategy=PercentileStrategy.LATERALIZATION_PIECEWISE,
    regions=(
        RegionSpec("superiortemporal", 0.28, (68, 18, 14)),
        RegionSpec("parsopercularis", 0.22, (62, 22, 16)),
        RegionSpec("parstriangularis", 0.18, (58, 25, 17)),
        RegionSpec("inferiorparietal", 0.12, (55, 32, 13)),
        RegionSpec("middletemporal", 0.10, (60, 20, 20)),
        RegionSpec("fusiform", 0.06, (45, 20, 35)),
        RegionSpec("supramarginal", 0.04, (48, 38, 14)),
    ),
    formula="LI = (Σw×zL − Σw×zR) / (|ΣwzL| + |ΣwzR|)",
    references=("ENIGMA-Laterality 2024", "Labache 2023 Cereb Cortex", "Knecht 2000 Brain"),
    threshold="≥0.20 typical left | ±0.05 bilateral | ≤-0.10 right",
    weights_text="per-region weights, see details",
)

# ── Advanced lateralization (4-10) ────────────────────────────────────────────

_META_ADVANCED = ("ENIGMA 2024", "UKBB 2024", "HCP 2025 meta-analysis")
_META_COGNITION = ("ENIGMA-Cognition 2024", "UKBB 2024", "HCP 2025 meta-analysis")

SPATIAL_ATTENTION_LATERALIZATION = IndexDefinition(
    key="spatial_attention_lateralization",
    name="Spatial Attention Lateralization Index",
    name_cn="空间注意偏向指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,
    precision=3,
    regions=(
        RegionSpec("inferiorparietal", 0.45, (20, 50, 30)),
        RegionSpec("superiorparietal", 0.35, (20, 50, 30)),
        RegionSpec("precuneus", 0.20, (25, 45, 30)),
    ),
    formula="LI_spatial = Σ wᵢ(zRᵢ − zLᵢ)",
    references=_META_ADVANCED,
    threshold="≥+0.80 extreme right (top 5%); ≥+0.40 clear right (top 15%); -0.20~+0.40 balanced; ≤-0.40 left",
    weights_text="thickness 20 : surface area 50 : volume 30",
)

EMOTION_LATERALIZATION = IndexDefinition(
    key="emotion_lateralization",
    name="Emotion Processing Lateralization Index",
    name_cn="情绪加工偏侧化指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,
    precision=3,
    regions=(
        RegionSpec("insula", 0.40, (70, 20, 10)),
        RegionSpec("medialorbitofrontal", 0.30, (65, 25, 10)),
        RegionSpec("rostralanteriorcingulate", 0.20, (70, 20, 10)),
        RegionSpec("posteriorcingulate", 0.10, (65, 25, 10)),
    ),
    formula="LI_emotion = Σ wᵢ(zRᵢ − zLᵢ)",
    references=_META_ADVANCED,
    threshold="≥+0.90 extreme right (top 8%); ≥+0.50 clear right; -0.30~+0.50 balanced; ≤-0.50 left (low-mood trait)",
    weights_text="thickness 65-70 : surface area 20-25 : volume 10",
)

FACE_RECOGNITION_LATERALIZATION = IndexDefinition(
    key="face_recognition_lateralization",
    name="Face Recognition Lateralization Index",
    name_cn="面孔识别偏侧化指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,
    precision=3,
    regions=(
        RegionSpec("fusiform", 0.70, (40, 20, 40), "fusiform/FFA"),
        RegionSpec("inferiortemporal", 0.20, (45, 25, 30)),
        RegionSpec("lateraloccipital", 0.10, (40, 30, 30)),
    ),
    formula="LI_face = Σ wᵢ(zRᵢ − zLᵢ)",
    references=_META_ADVANCED,
    threshold="≥+1.00 extreme right (top 3%); ≥+0.60 clear right (top 10%); -0.20~+0.60 balanced; ≤-0.60 rare left",
    weights_text="thickness 40-45 : surface area 20-30 : volume 30-40",
)

MUSIC_LATERALIZATION = IndexDefinition(
    key="music_lateralization",
    name="Music Perception Lateralization Index",
    name_cn="音乐感知偏侧化指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,
    precision=3,
    # No transverse temporal gyrus in DKT; superior temporal carries Heschl's share.
    regions=(
        RegionSpec("superiortemporal", 0.70, (65, 25, 10)),
        RegionSpec("middletemporal", 0.20, (60, 25, 15)),
        RegionSpec("insula", 0.10, (55, 30, 15)),
    ),
    formula="LI_music = Σ wᵢ(zRᵢ − zLᵢ)",
    references=_META_ADVANCED,
    threshold="≥+1.20 extreme right (top 1%); ≥+0.70 clear right (top 8%); -0.30~+0.70 balanced; ≤-0.70 left (rare)",
    weights_text="thickness 55-65 : surface area 25-30 : volume 10-15",
)

THEORY_OF_MIND_LATERALIZATION = IndexDefinition(
    key="theory_of_mind_lateralization",
    name="Theory of Mind Lateralization Index",
    name_cn="心理理论偏侧化指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,
    precision=3,
    regions=(
        RegionSpec("inferiorparietal", 0.40, (55, 30, 15), "inferiorparietal/angular"),
        RegionSpec("supramarginal", 0.30, (50, 35, 15)),
        RegionSpec("superiortemporal", 0.20, (60, 25, 15), "superiortemporal/TPJ"),
        RegionSpec("medialorbitofrontal", 0.10, (65, 20, 15)),
    ),
    formula="LI_tom = Σ wᵢ(zRᵢ − zLᵢ)",
    references=_META_ADVANCED,
    threshold="≥+0.80 extreme right (top 8%); ≥+0.40 clear right (top 20%); -0.20~+0.40 balanced; ≤-0.40 left",
    weights_text="thickness 50-65 : surface area 20-35 : volume 15",
)

LOGICAL_REASONING_LATERALIZATION = IndexDefinition(
    key="logical_reasoning_lateralization",
    name="Logical Reasoning Lateralization Index",
    name_cn="逻辑推理偏侧化指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,   # negative = left-brain advantage
    precision=3,
    regions=(
        RegionSpec("rostralmiddlefrontal", 0.40, (30, 30, 40)),
        RegionSpec("caudalmiddlefrontal", 0.25, (35, 25, 40)),
        RegionSpec("superiorfrontal", 0.20, (25, 35, 40)),
        RegionSpec("inferiorparietal", 0.15, (50, 30, 20)),
    ),
    formula="LI_logic = Σ wᵢ(zRᵢ − zLᵢ)  negative = left-brain advantage",
    references=_META_COGNITION,
    threshold=(
        "≤-0.80 extreme left (top 1%); ≤-0.50 marked left (top 5%); ≤-0.20 mild left (top 20%); "
        "±0.20 balanced; ≥+0.50 right advantage"
    ),
    weights_text="per-region weights, see details",
)

MATHEMATICAL_ABILITY_LATERALIZATION = IndexDefinition(
    key="mathematical_ability_lateralization",
    name="Mathematical Ability Lateralization Index",
    name_cn="数学能力偏侧化指数",
    category=IndexCategory.ADVANCED_LATERALIZATION,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.RIGHT_MINUS_LEFT,   # negative = left-brain advantage
    precision=3,
    regions=(
        RegionSpec("inferiorparietal", 0.50, (40, 30, 30)),
        RegionSpec("superiorfrontal", 0.25, (25, 35, 40)),
        RegionSpec("caudalmiddlefrontal", 0.15, (35, 25, 40)),
        RegionSpec("precuneus", 0.10, (30, 40, 30)),
    ),
    formula="LI_math = Σ wᵢ(zRᵢ − zLᵢ)  negative = left-brain advantage",
    references=_META_COGNITION,
    threshold=(
        "≤-0.90 extreme left (top 1%); ≤-0.60 marked left (top 3%); ≤-0.20 mild left (top 15%); "
        "±0.20 balanced; ≥+0.40 right advantage"
    ),
    weights_text="per-region weights, see details",
)

# ── Perception (11) ───────────────────────────────────────────────────────────

OLFACTORY = IndexDefinition(
    key="olfactory",
    name="Olfactory Function Index",
    name_cn="嗅觉功能指数",
    category=IndexCategory.PERCEPTION,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.5, 0.5),
    regions=_uniform(
        (80, 10, 10),
        ("entorhinal", 0.60),
        ("parahippocampal", 0.20),
        ("medialorbitofrontal", 0.20),
    ),
    formula="Olfaction_z = Σ[w × ((z_L + z_R)/2)]",
    references=("Saygin 2022 Neuroimage", "ENIGMA-Olfaction 2024"),
    threshold="> +1.0 top 16%; > +1.5 top 7%",
    weights_text="thickness 80 : surface area 10 : volume 10",
)

# ── Language & reading (12-14) ────────────────────────────────────────────────

LANGUAGE_COMPOSITE = IndexDefinition(
    key="language_composite",
    name="Language Composite Index",
    name_cn="语言综合指数",
    category=IndexCategory.LANGUAGE_READING,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.7, 0.3),
    regions=(
        RegionSpec("superiortemporal", 0.35, (45, 30, 25)),
        RegionSpec("parsopercularis", 0.25, (45, 30, 25), "parsopercularis/BA44"),
        RegionSpec("parstriangularis", 0.20, (45, 30, 25), "parstriangularis/BA45"),
        RegionSpec("middletemporal", 0.10, (45, 30, 25)),
        RegionSpec("fusiform", 0.10, (45, 30, 25)),
    ),
    formula="Language_z = Σ[w × (0.7×z_L + 0.3×z_R)]",
    references=("Friederici 2022 Brain", "ENIGMA-Language 2024"),
    threshold="> +2.0 top 2.5%; > +2.4 top 0.7%",
    weights_text="thickness 45 : surface area 30 : volume 25",
)

READING_FLUENCY = IndexDefinition(
    key="reading_fluency",
    name="Reading Fluency Index",
    name_cn="阅读流畅性指数",
    category=IndexCategory.LANGUAGE_READING,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.75, 0.25),
    regions=_uniform(
        (50, 30, 20),
        ("superiortemporal", 0.40),
        ("supramarginal", 0.25),
        ("inferiorparietal", 0.20),
        ("fusiform", 0.15),
    ),
    formula="Reading_z = Σ[w × (0.75×z_L + 0.25×z_R)]",
    references=("Black 2022 Brain", "ABCD/ENIGMA-Reading 2024"),
    threshold="> +2.0 top 2.5%",
    weights_text="thickness 50 : surface area 30 : volume 20",
)

DYSLEXIA_RISK = IndexDefinition(
    key="dyslexia_risk",
    name="Dyslexia Structural Risk Index",
    name_cn="阅读障碍结构风险指数",
    category=IndexCategory.LANGUAGE_READING,
    rule=CombinationRule.ASYMMETRY,
    sign=SignConvention.LEFT_MINUS_RIGHT,   # negative = weak left reading network = risk
    normalize_by_coverage=True,
    regions=(
        RegionSpec("superiortemporal", 0.25, (60, 15, 25)),
        RegionSpec("fusiform", 0.20, (40, 20, 40)),
        RegionSpec("inferiorparietal", 0.20, (50, 30, 20)),
        RegionSpec("supramarginal", 0.20, (30, 50, 20)),
        RegionSpec("middletemporal", 0.15, (70, 10, 20)),
    ),
    formula="Dyslexia_risk = Σ[w × (z_L − z_R)]",
    references=("Richlan 2013 Hum Brain Mapp", "ENIGMA-Dyslexia 2024", "Vandermosten 2012 Brain"),
    threshold="< -1.0 high risk; < -0.5 moderate risk; ≥ -0.5 low risk",
    weights_text="per-region metric weights, see details",
)

# ── Cognition (15-18) ─────────────────────────────────────────────────────────

EMPATHY = IndexDefinition(
    key="empathy",
    name="Empathy Index",
    name_cn="共情能力指数",
    category=IndexCategory.COGNITION,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.5, 0.5),
    regions=_uniform(
        (80, 10, 10),
        ("rostralanteriorcingulate", 0.45),
        ("medialorbitofrontal", 0.25),
        ("insula", 0.20),
        ("posteriorcingulate", 0.10),
    ),
    formula="Empathy_z = Σ[w × ((z_L + z_R)/2)]",
    references=("Timmers 2018 Neurosci Biobehav Rev", "UKBB-EQ 2024"),
    threshold="> +1.5 top 7%; > +1.6 top 5%",
    weights_text="thickness 80 : surface area 10 : volume 10",
)

EXECUTIVE_FUNCTION = IndexDefinition(
    key="executive_function",
    name="Executive Function Index",
    name_cn="执行功能指数",
    category=IndexCategory.COGNITION,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.5, 0.5),
    regions=_uniform(
        (35, 25, 40),
        ("superiorfrontal", 0.40),
        ("rostralmiddlefrontal", 0.30),
        ("caudalmiddlefrontal", 0.20),
        ("parsopercularis", 0.10),
    ),
    formula="Executive_z = Σ[w × ((z_L + z_R)/2)]",
    references=("Woolgar 2021 Neuropsychopharm", "ENIGMA-Cognition 2024"),
    threshold="> +1.8 top 4%; > +1.9 top 3%",
    weights_text="thickness 35 : surface area 25 : volume 40",
)

SPATIAL_PROCESSING = IndexDefinition(
    key="spatial_processing",
    name="Spatial Processing Index",
    name_cn="空间加工指数",
    category=IndexCategory.COGNITION,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.4, 0.6),
    regions=_uniform(
        (20, 50, 30),
        ("inferiorparietal", 0.50),
        ("superiorparietal", 0.35),
        ("precuneus", 0.15),
    ),
    formula="Spatial_z = Σ[w × (0.4×z_L + 0.6×z_R)]",
    references=("Ruthsatz 2023 Cortex", "Seghier 2022 Neuroimage"),
    threshold="> +1.2 top 11%; > +1.5 top 7%",
    weights_text="thickness 20 : surface area 50 : volume 30",
)

FLUID_INTELLIGENCE = IndexDefinition(
    key="fluid_intelligence",
    name="Fluid Intelligence Index (Structural)",
    name_cn="流体智力结构估计指数",
    category=IndexCategory.COGNITION,
    rule=CombinationRule.BLENDED_MEAN,
    hemisphere_blend=(0.5, 0.5),
    regions=_uniform(
        (30, 30, 40),
        ("superiorfrontal", 0.25),
        ("inferiorparietal", 0.20),
        ("superiortemporal", 0.20),
        ("rostralmiddlefrontal", 0.20),
        ("insula", 0.15),
    ),
    formula="gF_z = Σ[w × ((z_L + z_R)/2)]",
    references=("Nave 2023 Sci Adv", "Pietschnig 2020 Cereb Cortex", "UKBB 2024"),
    threshold="> +2.0 top 2.5%; > +2.1 top 1.8% (ceiling of a structural estimate)",
    weights_text="thickness 30 : surface area 30 : volume 40",
)


# ── Registry ──────────────────────────────────────────────────────────────────
# Order is the report order; summary rules look indices up by key, never by
# position.
INDEX_CATALOG: Tuple[IndexDefinition, ...] = (
    HANDEDNESS,
    DOMINANT_EYE,
    PREFERRED_NOSTRIL,
    LANGUAGE_LATERALIZATION,
    SPATIAL_ATTENTION_LATERALIZATION,
    EMOTION_LATERALIZATION,
    FACE_RECOGNITION_LATERALIZATION,
    MUSIC_LATERALIZATION,
    THEORY_OF_MIND_LATERALIZATION,
    LOGICAL_REASONING_LATERALIZATION,
    MATHEMATICAL_ABILITY_LATERALIZATION,
    OLFACTORY,
    LANGUAGE_COMPOSITE,
    READING_FLUENCY,
    DYSLEXIA_RISK,
    EMPATHY,
    EXECUTIVE_FUNCTION,
    SPATIAL_PROCESSING,
    FLUID_INTELLIGENCE,
)

_BY_KEY: Dict[str, IndexDefinition] = {d.key: d for d in INDEX_CATALOG}


def get_definition(key: str) -> IndexDefinition:
    """Look up a definition by key; raises UnknownIndexError."""
    try:
        return _BY_KEY[key]
    except KeyError:
        raise UnknownIndexError(key) from None


def list_definitions() -> List[IndexDefinition]:
    """All definitions in report order."""
    return list(INDEX_CATALOG)
