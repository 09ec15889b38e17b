"""
Validation Module

Plausibility checks on parsed measurements, run before scoring.
"""
from .measurement_plausibility import (
    MeasurementValidator,
    MeasurementViolation,
    ValidationResult,
    ViolationType,
)

__all__ = [
    "MeasurementValidator",
    "MeasurementViolation",
    "ValidationResult",
    "ViolationType",
]
