"""
Measurement Plausibility Validation Module

Checks a parsed hemisphere map before it reaches the index engine.
Detects non-numeric fields, impossible (non-positive) sizes and values far
outside the reference cohort. The engine itself never validates; this
layer reports, and only raises in strict mode.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Union
from enum import Enum
import numpy as np

from neuroindex import config
from neuroindex.core.ingestion.base import Hemisphere, HemisphereMap
from neuroindex.core.scoring.reference import REFERENCE_TABLE, ReferenceTable
from neuroindex.core.scoring.standard_score import metric_z_scores
from neuroindex.utils import get_logger, MeasurementValidationError

logger = get_logger(__name__)

METRICS = ("thickness", "surface_area", "volume")


class ViolationType(str, Enum):
    """Types of measurement violations."""
    NON_FINITE = "non_finite"             # NaN / inf field
    NON_POSITIVE = "non_positive"         # size <= 0
    IMPLAUSIBLE = "implausible"           # |z| beyond the plausibility limit
    UNKNOWN_REGION = "unknown_region"     # not in the reference table
    EMPTY_MAP = "empty_map"               # no regions parsed at all


# Severity per violation type, 0-1, 1 = critical
_SEVERITY = {
    ViolationType.NON_FINITE:     1.0,
    ViolationType.NON_POSITIVE:   0.9,
    ViolationType.IMPLAUSIBLE:    0.5,
    ViolationType.UNKNOWN_REGION: 0.0,
    ViolationType.EMPTY_MAP:      1.0,
}


@dataclass
class MeasurementViolation:
    """A single measurement violation."""
    region: str
    violation_type: ViolationType
    message: str
    severity: float = 0.5
    metric: Optional[str] = None
    actual_value: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "region": self.region,
            "type": self.violation_type.value,
            "message": self.message,
            "severity": round(self.severity, 2),
            "metric": self.metric,
            "actual_value": self.actual_value,
        }


@dataclass
class ValidationResult:
    """Result of validating one hemisphere map."""
    hemisphere: Hemisphere
    is_valid: bool = True
    overall_plausibility: float = 1.0  # 0-1
    region_count: int = 0
    known_region_count: int = 0
    violations: List[MeasurementViolation] = field(default_factory=list)

    def by_type(self, violation_type: ViolationType) -> List[MeasurementViolation]:
        return [v for v in self.violations if v.violation_type == violation_type]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hemisphere": self.hemisphere.value,
            "is_valid": self.is_valid,
            "overall_plausibility": round(self.overall_plausibility, 3),
            "region_count": self.region_count,
            "known_region_count": self.known_region_count,
            "violation_count": len(self.violations),
            "violations": [v.to_dict() for v in self.violations],
        }


class MeasurementValidator:
    """
    Validates a hemisphere map against hard physical constraints and the
    reference cohort.

    Unknown regions are informational only: the report lists many regions
    no index uses.
    """

    def __init__(
        self,
        reference: Optional[ReferenceTable] = None,
        implausible_z: Optional[float] = None,
    ):
        self.reference = REFERENCE_TABLE if reference is None else reference
        self.implausible_z = config.IMPLAUSIBLE_Z if implausible_z is None else implausible_z

    def validate(
        self,
        hemisphere_map: HemisphereMap,
        hemisphere: Union[Hemisphere, str] = Hemisphere.LEFT,
        strict: bool = False,
    ) -> ValidationResult:
        """
        Validate one hemisphere map.

        Args:
            hemisphere_map: Region name → measurement
            hemisphere:     Which side the map describes
            strict:         Raise MeasurementValidationError on non-finite data

        Returns:
            ValidationResult with violations
        """
        hemisphere = Hemisphere(hemisphere)
        result = ValidationResult(hemisphere=hemisphere, region_count=len(hemisphere_map))
        violations: List[MeasurementViolation] = []

        if not hemisphere_map:
            violations.append(self._violation(
                "*", ViolationType.EMPTY_MAP, f"No regions parsed for {hemisphere.value}"
            ))

        for region, measurement in hemisphere_map.items():
            values = np.array([getattr(measurement, m) for m in METRICS], dtype=float)
            finite = np.isfinite(values)

            for metric, value, ok in zip(METRICS, values, finite):
                if not ok:
                    violations.append(self._violation(
                        region, ViolationType.NON_FINITE,
                        f"{region}.{metric} is not a finite number",
                        metric=metric, actual_value=float(value),
                    ))
                elif value <= 0:
                    violations.append(self._violation(
                        region, ViolationType.NON_POSITIVE,
                        f"{region}.{metric} must be positive, got {value:g}",
                        metric=metric, actual_value=float(value),
                    ))

            ref = self.reference.get(region)
            if ref is None:
                violations.append(self._violation(
                    region, ViolationType.UNKNOWN_REGION,
                    f"{region} has no reference entry and is not scored",
                ))
                continue
            result.known_region_count += 1

            z_scores = np.array(metric_z_scores(measurement, ref), dtype=float)
            for metric, z, ok in zip(METRICS, z_scores, finite):
                if ok and abs(z) > self.implausible_z:
                    violations.append(self._violation(
                        region, ViolationType.IMPLAUSIBLE,
                        f"{region}.{metric} is {z:+.1f} SD from the reference mean",
                        metric=metric, actual_value=float(getattr(measurement, metric)),
                    ))

        result.violations = violations
        scored = [v for v in violations if v.severity > 0]
        if scored:
            result.is_valid = not any(v.severity >= 0.8 for v in scored)
            weighted_severity = sum(v.severity for v in scored)
            total_weight = max(result.region_count * len(METRICS), 1)
            result.overall_plausibility = float(np.clip(1.0 - weighted_severity / total_weight, 0, 1))

        if strict:
            non_finite = result.by_type(ViolationType.NON_FINITE)
            if non_finite:
                raise MeasurementValidationError(
                    f"{len(non_finite)} non-finite measurement(s) in {hemisphere.value}",
                    hemisphere=hemisphere.value,
                    details={"regions": sorted({v.region for v in non_finite})},
                )

        if not result.is_valid:
            logger.debug(
                f"MeasurementValidator [{hemisphere.value}]: {len(scored)} violation(s), "
                f"plausibility={result.overall_plausibility:.3f}"
            )
        return result

    @staticmethod
    def _violation(region: str, violation_type: ViolationType, message: str, **kwargs) -> MeasurementViolation:
        return MeasurementViolation(
            region=region,
            violation_type=violation_type,
            message=message,
            severity=_SEVERITY[violation_type],
            **kwargs,
        )
