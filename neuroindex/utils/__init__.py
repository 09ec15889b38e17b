"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    NeuroIndexError,
    IngestionError,
    ReferenceDataError,
    UnknownIndexError,
    MeasurementValidationError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "NeuroIndexError",
    "IngestionError",
    "ReferenceDataError",
    "UnknownIndexError",
    "MeasurementValidationError",
]
