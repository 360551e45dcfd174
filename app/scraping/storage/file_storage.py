"""
File-backed report storage writing JSON, CSV and HTML artifacts.
"""

from __future__ import annotations

import csv
import json
import logging
import re
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app.domain.competitor_scanning import CompetitorResult
from app.schemas.competitor_scanning import CompetitorResultResponse
from app.scraping.logging_utils import log_event
from app.scraping.storage.base import ReportArtifacts, ReportStorage
from app.scraping.storage.html_report import render_html_report

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "Competitor",
    "Title",
    "Date",
    "Likely Update",
    "Content Preview",
    "Content Length",
    "Scraped At",
]
NO_DATE_FOUND = "No date found"


def timestamp_token(moment: datetime) -> str:
    """
    Filesystem-safe ISO-8601 UTC token, e.g. 2025-01-05T10-30-00-123Z.
    """

    iso = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return re.sub(r"[:.]", "-", iso.replace("+00:00", "Z"))


def csv_rows(results: Sequence[CompetitorResult]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for result in results:
        scraped_at = result.scraped_at.isoformat()
        for item in result.items:
            rows.append(
                {
                    "Competitor": item.competitor,
                    "Title": item.title,
                    "Date": item.extracted_date or NO_DATE_FOUND,
                    "Likely Update": "Yes" if item.is_likely_update else "No",
                    "Content Preview": item.content,
                    "Content Length": item.content_length,
                    "Scraped At": scraped_at,
                }
            )
    return rows


class FileReportStorage(ReportStorage):
    """
    Write one timestamp-tagged JSON/CSV/HTML triple per run.
    """

    def __init__(self, *, output_dir: str | Path) -> None:
        self._output_dir = Path(output_dir)

    def store(
        self,
        results: Sequence[CompetitorResult],
        *,
        generated_at: datetime | None = None,
    ) -> ReportArtifacts:
        generated = generated_at or datetime.now(timezone.utc)
        token = timestamp_token(generated)
        self._output_dir.mkdir(parents=True, exist_ok=True)

        artifacts = ReportArtifacts(
            timestamp=token,
            json_path=self._output_dir / f"analysis-{token}.json",
            csv_path=self._output_dir / f"summary-{token}.csv",
            html_path=self._output_dir / f"report-{token}.html",
        )

        payload = [
            CompetitorResultResponse.from_domain(result).model_dump(mode="json", by_alias=True)
            for result in results
        ]
        artifacts.json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

        with artifacts.csv_path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
            writer.writeheader()
            writer.writerows(csv_rows(results))

        artifacts.html_path.write_text(
            render_html_report(results, generated_at=generated),
            encoding="utf-8",
        )

        log_event(
            logger,
            logging.INFO,
            "reports_written",
            output_dir=str(self._output_dir),
            timestamp=token,
            competitors=len(results),
        )
        return artifacts
