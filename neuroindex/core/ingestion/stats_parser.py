"""
DKT Stats Report Parser

Turns a FreeSurfer ``?h.aparc.DKTatlas.stats`` table into a HemisphereMap.

Format rules:
  - Everything up to and including the line carrying the ``ColHeaders``
    marker is preamble.
  - After it, blank lines and lines starting with ``#`` are skipped.
  - Data rows are whitespace separated with fixed column positions:
        col 1 StructName | col 3 SurfArea | col 4 GrayVol | col 5 ThickAvg
    Rows with fewer than five fields are ignored.

Malformed numbers become NaN and are deliberately not trapped here; the
validation layer reports them and the engine lets them propagate.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Union

from neuroindex.utils import IngestionError, get_logger
from .base import HemisphereMap, RegionMeasurement

logger = get_logger(__name__)

HEADER_MARKER = "ColHeaders"
COMMENT_PREFIX = "#"
MIN_FIELDS = 5

# 0-based column positions
COL_REGION = 0
COL_SURFACE_AREA = 2
COL_VOLUME = 3
COL_THICKNESS = 4


# Plain decimal or exponent notation; rejects "inf", "nan" and "1_000"
_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _to_float(field: str) -> float:
    if not _NUMBER.match(field):
        return float("nan")
    return float(field)


def parse_dkt_stats(content: str) -> HemisphereMap:
    """
    Parse report text into a region → RegionMeasurement map.

    Returns an empty map when the header marker never appears; callers
    treat that as "no usable data for this hemisphere".
    """
    data: HemisphereMap = {}
    in_table = False

    for line in content.splitlines():
        if not in_table:
            if HEADER_MARKER in line:
                in_table = True
            continue

        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        parts = stripped.split()
        if len(parts) < MIN_FIELDS:
            continue

        data[parts[COL_REGION]] = RegionMeasurement(
            thickness=_to_float(parts[COL_THICKNESS]),
            surface_area=_to_float(parts[COL_SURFACE_AREA]),
            volume=_to_float(parts[COL_VOLUME]),
        )

    if not in_table:
        logger.debug(f"parse_dkt_stats: no '{HEADER_MARKER}' marker found, empty map")
    else:
        logger.debug(f"parse_dkt_stats: {len(data)} region(s) parsed")
    return data


def load_dkt_stats(path: Union[str, Path]) -> HemisphereMap:
    """Read and parse a stats file from disk."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IngestionError(
            f"Could not read stats report {path}: {exc}",
            source=str(path),
        ) from exc
    return parse_dkt_stats(content)
