"""
Reference Cohort Table

Adult male population means and standard deviations per DKT region for
the three structural metrics. Sources: ENIGMA, UK Biobank and HCP
releases 2022-2024.

The table is a fixed constant. Its only invariant (every standard
deviation strictly positive) is checked once at import; scoring code
divides by these values without re-checking.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from neuroindex.utils.exceptions import ReferenceDataError


@dataclass(frozen=True)
class MetricReference:
    """Population mean and standard deviation for one metric."""
    mean: float
    std: float


@dataclass(frozen=True)
class ReferenceEntry:
    """Population reference for one region across all three metrics."""
    thickness: MetricReference
    surface_area: MetricReference
    volume: MetricReference


def _entry(thickness, surface_area, volume) -> ReferenceEntry:
    return ReferenceEntry(
        thickness=MetricReference(*thickness),
        surface_area=MetricReference(*surface_area),
        volume=MetricReference(*volume),
    )


# region: (thickness mm), (surface area mm²), (volume mm³) as (mean, std)
REFERENCE_DATA_MALE: Dict[str, ReferenceEntry] = {
    "precentral":               _entry((2.65, 0.18), (5400, 650),  (16500, 2200)),
    "postcentral":              _entry((2.15, 0.16), (5200, 600),  (13500, 1800)),
    "paracentral":              _entry((2.45, 0.17), (1700, 280),  (4800, 700)),
    "pericalcarine":            _entry((1.55, 0.14), (1900, 320),  (2400, 400)),
    "cuneus":                   _entry((1.95, 0.15), (2300, 380),  (4600, 650)),
    "lingual":                  _entry((2.05, 0.15), (3800, 500),  (8200, 1100)),
    "entorhinal":               _entry((3.20, 0.35), (480, 100),   (1600, 350)),
    "parahippocampal":          _entry((2.75, 0.22), (700, 120),   (2200, 380)),
    "medialorbitofrontal":      _entry((2.45, 0.20), (1800, 300),  (5000, 750)),
    "superiortemporal":         _entry((2.85, 0.20), (5800, 700),  (19000, 2500)),
    "parsopercularis":          _entry((2.55, 0.16), (1600, 250),  (4500, 650)),
    "parstriangularis":         _entry((2.40, 0.17), (1550, 280),  (4000, 600)),
    "middletemporal":           _entry((2.85, 0.19), (5000, 650),  (16000, 2200)),
    "fusiform":                 _entry((2.70, 0.18), (3300, 450),  (9500, 1300)),
    "supramarginal":            _entry((2.60, 0.17), (3800, 500),  (11500, 1600)),
    "inferiorparietal":         _entry((2.50, 0.16), (5500, 700),  (15500, 2100)),
    "rostralanteriorcingulate": _entry((2.85, 0.22), (1100, 200),  (3500, 550)),
    "insula":                   _entry((3.05, 0.22), (2500, 350),  (7800, 1000)),
    "posteriorcingulate":       _entry((2.45, 0.20), (1500, 250),  (4000, 600)),
    "superiorfrontal":          _entry((2.75, 0.18), (9500, 1200), (30000, 4000)),
    "rostralmiddlefrontal":     _entry((2.40, 0.17), (4700, 600),  (13000, 1800)),
    "caudalmiddlefrontal":      _entry((2.65, 0.17), (2600, 400),  (7500, 1000)),
    "superiorparietal":         _entry((2.25, 0.15), (5200, 650),  (13000, 1700)),
    "precuneus":                _entry((2.40, 0.16), (4600, 580),  (12000, 1600)),
    "lateraloccipital":         _entry((2.20, 0.16), (6300, 800),  (15000, 2000)),
    "lateralorbitofrontal":     _entry((2.55, 0.20), (3500, 480),  (9800, 1400)),
    "inferiortemporal":         _entry((2.80, 0.20), (3900, 520),  (12500, 1700)),
}


class ReferenceTable:
    """Read-only view over a region → ReferenceEntry mapping."""

    def __init__(self, entries: Optional[Dict[str, ReferenceEntry]] = None):
        self._entries = dict(REFERENCE_DATA_MALE if entries is None else entries)
        self.validate()

    def validate(self) -> None:
        """Raise ReferenceDataError unless every std is finite and > 0."""
        for region, entry in self._entries.items():
            for metric in ("thickness", "surface_area", "volume"):
                ref: MetricReference = getattr(entry, metric)
                if not (math.isfinite(ref.std) and ref.std > 0):
                    raise ReferenceDataError(
                        f"Standard deviation for {region}.{metric} must be > 0, got {ref.std}",
                        region=region,
                        details={"metric": metric, "std": ref.std},
                    )

    def get(self, region: str) -> Optional[ReferenceEntry]:
        return self._entries.get(region)

    def __contains__(self, region: str) -> bool:
        return region in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def regions(self):
        return list(self._entries.keys())


# Module-level singleton; constructing it enforces the std > 0 invariant.
REFERENCE_TABLE = ReferenceTable()
