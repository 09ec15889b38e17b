"""
Measurement Base Types

Data contracts produced by the report parser and consumed by every
downstream layer (scoring, indices, validation).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Hemisphere(str, Enum):
    """Cortical hemisphere a report describes."""
    LEFT = "lh"
    RIGHT = "rh"


@dataclass(frozen=True)
class RegionMeasurement:
    """
    Observed structure of one DKT region in one hemisphere.

    thickness     – mean cortical thickness (mm, ThickAvg)
    surface_area  – white-surface area (mm², SurfArea)
    volume        – grey-matter volume (mm³, GrayVol)

    Values may be NaN when the report carried a malformed field.
    """
    thickness: float
    surface_area: float
    volume: float

    def to_dict(self) -> dict:
        return {
            "thickness": self.thickness,
            "surface_area": self.surface_area,
            "volume": self.volume,
        }


# Region name → measurement, one map per hemisphere.
HemisphereMap = Dict[str, RegionMeasurement]
