"""
neuroindex - Configuration
==========================
Runtime settings for the host application (logging, validation policy).
Loads overrides from the project-level .env file.

The index weights, reference cohort and band thresholds are NOT settings:
they live as constants in neuroindex.core and are never read from the
environment.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PACKAGE_DIR = Path(__file__).resolve().parent                 # neuroindex/
PROJECT_ROOT = PACKAGE_DIR.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("NEUROINDEX_LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("NEUROINDEX_LOG_FILE", "")          # empty = console only

# ── Measurement validation ──────────────────────────────────────────────
# Strict mode raises on non-finite measurements instead of reporting them.
STRICT_VALIDATION: bool = _env_bool("NEUROINDEX_STRICT_VALIDATION", False)
# |z| above this on any metric is reported as implausible (never rejected)
IMPLAUSIBLE_Z: float = float(os.getenv("NEUROINDEX_IMPLAUSIBLE_Z", "6.0"))
