"""
Structural Index Layer

Declarative catalog of 19 indices, one generic evaluator and the
interpretation band tables.

Usage:
    from neuroindex.core.indices import IndexEngine

    engine = IndexEngine()
    results = engine.evaluate_all(left_map, right_map)
"""
from .base import (
    CombinationRule,
    SignConvention,
    IndexCategory,
    RegionSpec,
    IndexDefinition,
    RegionContribution,
    IndexResult,
)
from .catalog import INDEX_CATALOG, get_definition, list_definitions
from .interpretations import classify, classify_with_level, BAND_TABLES, INDETERMINATE
from .engine import IndexEngine

__all__ = [
    "CombinationRule",
    "SignConvention",
    "IndexCategory",
    "RegionSpec",
    "IndexDefinition",
    "RegionContribution",
    "IndexResult",
    "INDEX_CATALOG",
    "get_definition",
    "list_definitions",
    "classify",
    "classify_with_level",
    "BAND_TABLES",
    "INDETERMINATE",
    "IndexEngine",
]
