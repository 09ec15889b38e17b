"""
Custom Exception Hierarchy

Provides specific exception types for different error categories
with structured error information.

The index engine itself raises none of these during normal operation:
missing regions are skipped and malformed numbers propagate as NaN.
"""
from typing import Optional, Dict, Any


class NeuroIndexError(Exception):
    """Base exception for all neuroindex errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON output."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class IngestionError(NeuroIndexError):
    """A measurement report could not be read."""

    def __init__(
        self,
        message: str,
        source: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INGESTION_ERROR",
            details={"source": source, **(details or {})}
        )
        self.source = source


class ReferenceDataError(NeuroIndexError):
    """The reference cohort table violates its invariants."""

    def __init__(
        self,
        message: str,
        region: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="REFERENCE_DATA_ERROR",
            details={"region": region, **(details or {})}
        )
        self.region = region


class UnknownIndexError(NeuroIndexError, KeyError):
    """An index key is not part of the catalog."""

    def __init__(
        self,
        key: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Unknown index: {key!r}",
            code="UNKNOWN_INDEX",
            details={"index": key, **(details or {})}
        )
        self.key = key

    def __str__(self) -> str:
        return self.message


class MeasurementValidationError(NeuroIndexError):
    """Parsed measurements failed strict validation."""

    def __init__(
        self,
        message: str,
        hemisphere: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"hemisphere": hemisphere, **(details or {})}
        )
        self.hemisphere = hemisphere
