"""
Analyze a pair of DKT stats reports and print the report as JSON.

Run: python scripts/analyze_stats.py lh.aparc.DKTatlas.stats rh.aparc.DKTatlas.stats
"""
import argparse
import json
import sys

from neuroindex import config
from neuroindex.services import StructuralAnalysisService
from neuroindex.utils import NeuroIndexError, setup_logging


def main():
    ap = argparse.ArgumentParser(description="Compute structural indices from DKT stats reports")
    ap.add_argument("lh", help="left hemisphere stats file")
    ap.add_argument("rh", help="right hemisphere stats file")
    ap.add_argument("--strict", action="store_true", help="reject non-finite measurements")
    ap.add_argument("--summary-only", action="store_true", help="print only the summary block")
    args = ap.parse_args()

    setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)

    service = StructuralAnalysisService(strict=args.strict or None)
    try:
        report = service.analyze_files(args.lh, args.rh)
    except NeuroIndexError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False, indent=2), file=sys.stderr)
        sys.exit(1)

    out = report.summary.to_dict() if args.summary_only else report.to_dict()
    print(json.dumps(out, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
