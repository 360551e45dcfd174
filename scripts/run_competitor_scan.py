"""
Run competitor "what's new" scanning from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace

from playwright.sync_api import Error as PlaywrightError

from app.scraping.config import get_competitor_scan_settings
from app.scraping.logging_utils import configure_logging, log_event
from app.services.competitor_scanning_service import (
    CompetitorScanningService,
    ScanConfigurationError,
    ScanRunReport,
)

logger = logging.getLogger(__name__)


def _summary_payload(report: ScanRunReport) -> dict:
    return {
        "competitors": [
            {
                "competitor": result.competitor,
                "item_count": result.item_count,
                "error": result.error,
            }
            for result in report.results
        ],
        "total_items": report.results.total_items,
        "reports": {
            "json": str(report.artifacts.json_path),
            "csv": str(report.artifacts.csv_path),
            "html": str(report.artifacts.html_path),
        },
    }


def _print_summary(report: ScanRunReport) -> None:
    print("ANALYSIS COMPLETE")
    print("=" * 51)
    for result in report.results:
        print(f"{result.competitor}: {result.item_count} items found")
        if result.error:
            print(f"  Error: {result.error}")
    print(f"JSON report: {report.artifacts.json_path}")
    print(f"CSV summary: {report.artifacts.csv_path}")
    print(f"HTML report: {report.artifacts.html_path}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Scan competitor what's-new pages.")
    parser.add_argument(
        "--competitor",
        dest="competitor",
        default=None,
        help="Optional competitor key or name from config file.",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory for report files (overrides COMPETITOR_SCAN_OUTPUT_DIR).",
    )
    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the run summary as JSON.",
    )
    args = parser.parse_args()
    configure_logging()

    settings = get_competitor_scan_settings()
    if args.output_dir:
        settings = replace(settings, output_dir=args.output_dir)

    service = CompetitorScanningService(settings=settings)
    try:
        report = service.scan(competitor=args.competitor)
    except ScanConfigurationError as exc:
        log_event(logger, logging.ERROR, "scan_configuration_invalid", error=str(exc))
        return 2
    except PlaywrightError as exc:
        log_event(logger, logging.ERROR, "browser_launch_failed", error=str(exc))
        return 1
    except OSError as exc:
        log_event(logger, logging.ERROR, "reports_write_failed", error=str(exc))
        return 1

    if args.as_json:
        print(json.dumps(_summary_payload(report), indent=2))
    else:
        _print_summary(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
