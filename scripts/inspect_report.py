"""
Diagnostic script for QuickBooks report exports.

Prints what the importer makes of a local export:
1. Detected (or forced) report type.
2. Reporting period.
3. Parsed and skipped row counts and the summary.

Usage:
    python scripts/inspect_report.py <file> [report_type]
"""
import json
import mimetypes
import sys
from pathlib import Path

from qbreports.exceptions import QBReportsError
from qbreports.logging_config import configure_logging
from qbreports.services.quickbooks_parser import parse_quickbooks_report

MIME_BY_SUFFIX = {
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".csv": "text/csv",
}


def inspect_report(path: Path, report_type=None) -> int:
    if not path.exists():
        print(f"File not found: {path}")
        return 1

    mime_type = MIME_BY_SUFFIX.get(path.suffix.lower()) or mimetypes.guess_type(path.name)[0] or ""
    print(f"\n--- Inspecting: {path.name} ({mime_type or 'unknown type'}) ---")

    try:
        result = parse_quickbooks_report(path.read_bytes(), mime_type, report_type)
    except QBReportsError as e:
        print(f"  [{e.error_code}] {e.message}")
        return 2

    data = result.to_dict()
    print(f"  Type:    {data['type']}")
    print(f"  Period:  {data['period']} ({data['periodStart']} to {data['periodEnd']})")
    print(f"  Rows:    {len(data['parsed'])} parsed, {result.skipped_rows} skipped")
    print("  Summary:")
    print(json.dumps(data["summary"], indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    configure_logging(level="WARNING", json_logs=False)
    forced_type = sys.argv[2] if len(sys.argv) > 2 else None
    sys.exit(inspect_report(Path(sys.argv[1]), forced_type))
