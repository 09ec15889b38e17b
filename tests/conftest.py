"""
Pytest Configuration and Fixtures

Shared fixtures for structural index tests.
"""
import pytest
from pathlib import Path
import sys
from typing import Callable, Dict, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from neuroindex.core.ingestion.base import HemisphereMap, RegionMeasurement
from neuroindex.core.scoring.reference import REFERENCE_DATA_MALE


def make_hemisphere(
    z: Optional[Dict[str, float]] = None,
    default_z: float = 0.0,
) -> HemisphereMap:
    """
    Hemisphere map over every reference region, each metric sitting
    ``z[region]`` (or ``default_z``) standard deviations from the mean.
    """
    z = z or {}
    data: HemisphereMap = {}
    for region, ref in REFERENCE_DATA_MALE.items():
        k = z.get(region, default_z)
        data[region] = RegionMeasurement(
            thickness=ref.thickness.mean + k * ref.thickness.std,
            surface_area=ref.surface_area.mean + k * ref.surface_area.std,
            volume=ref.volume.mean + k * ref.volume.std,
        )
    return data


def render_stats(data: HemisphereMap, hemisphere: str = "lh") -> str:
    """Render a hemisphere map in the aparc.DKTatlas.stats table layout."""
    lines = [
        "# Title Segmentation Statistics",
        f"# hemi {hemisphere}",
        "# Measure Cortex, NumVert, Number of Vertices, 150000, unitless",
        "# NTableCols 10",
        "# ColHeaders StructName NumVert SurfArea GrayVol ThickAvg ThickStd "
        "MeanCurv GausCurv FoldInd CurvInd",
    ]
    for region, m in data.items():
        lines.append(
            f"{region:<28} 5000 {m.surface_area!r} {m.volume!r} {m.thickness!r} "
            "0.600 0.120 0.025 12 1.5"
        )
    return "\n".join(lines) + "\n"


@pytest.fixture
def mean_hemisphere() -> HemisphereMap:
    """Every reference region exactly at the cohort mean."""
    return make_hemisphere()


@pytest.fixture
def hemisphere_factory() -> Callable[..., HemisphereMap]:
    """Build hemisphere maps with per-region z offsets."""
    return make_hemisphere


@pytest.fixture
def stats_renderer() -> Callable[..., str]:
    """Render hemisphere maps as stats report text."""
    return render_stats
