"""
Standard Scorer

Per-metric z-scores and their weighted composite for one region.

Metric weights are percentage triples (thickness, surface area, volume)
such as (60, 30, 10); each is divided by 100 before use. The arithmetic
order here is fixed so results are reproducible to the last bit.
"""
from __future__ import annotations

from typing import Tuple

from neuroindex.core.ingestion.base import RegionMeasurement
from .reference import ReferenceEntry

MetricWeights = Tuple[float, float, float]


def z_score(value: float, mean: float, std: float) -> float:
    """(observed - mean) / std."""
    return (value - mean) / std


def metric_z_scores(
    measurement: RegionMeasurement,
    reference: ReferenceEntry,
) -> Tuple[float, float, float]:
    """Return (z_thickness, z_surface_area, z_volume)."""
    return (
        z_score(measurement.thickness, reference.thickness.mean, reference.thickness.std),
        z_score(measurement.surface_area, reference.surface_area.mean, reference.surface_area.std),
        z_score(measurement.volume, reference.volume.mean, reference.volume.std),
    )


def composite_z_score(
    measurement: RegionMeasurement,
    reference: ReferenceEntry,
    metric_weights: MetricWeights,
) -> float:
    """Blend the three metric z-scores into one composite score."""
    z_thick, z_area, z_vol = metric_z_scores(measurement, reference)
    w_thick, w_area, w_vol = (w / 100 for w in metric_weights)
    return z_thick * w_thick + z_area * w_area + z_vol * w_vol


def format_metric_weights(metric_weights: MetricWeights) -> str:
    """Render a weight triple as 'T:A:V', e.g. '60:30:10'."""
    return ":".join(f"{w:g}" for w in metric_weights)
