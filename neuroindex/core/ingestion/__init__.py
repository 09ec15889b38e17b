"""
Ingestion Module

Parses per-hemisphere structural reports into region-keyed measurements.
"""
from .base import Hemisphere, HemisphereMap, RegionMeasurement
from .stats_parser import parse_dkt_stats, load_dkt_stats, HEADER_MARKER

__all__ = [
    "Hemisphere",
    "HemisphereMap",
    "RegionMeasurement",
    "parse_dkt_stats",
    "load_dkt_stats",
    "HEADER_MARKER",
]
