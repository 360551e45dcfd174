"""
app/services/competitor_scanning_service.py

Service orchestration for competitor "what's new" scanning.
"""

from __future__ import annotations

from dataclasses import dataclass

import requests

from app.domain.competitor_scanning import ScanResultsCollector
from app.scraping.browser import PlaywrightPageFetcher
from app.scraping.config import CompetitorScanSettings, get_competitor_scan_settings, load_competitor_targets
from app.scraping.engine import CompetitorScanEngine
from app.scraping.robots import RobotsPolicyManager
from app.scraping.storage import FileReportStorage, ReportArtifacts, ReportStorage


class ScanConfigurationError(ValueError):
    """
    Raised when the competitor config cannot be loaded or selects nothing.
    """


@dataclass(frozen=True)
class ScanRunReport:
    """
    Results of one scan run plus the report files written for it.
    """

    results: ScanResultsCollector
    artifacts: ReportArtifacts


class CompetitorScanningService:
    """
    Runs the scan pipeline in one browser session and writes reports.
    """

    def __init__(
        self,
        settings: CompetitorScanSettings | None = None,
        storage: ReportStorage | None = None,
    ) -> None:
        self._settings = settings or get_competitor_scan_settings()
        self._storage = storage or FileReportStorage(output_dir=self._settings.output_dir)

    def scan(self, *, competitor: str | None = None) -> ScanRunReport:
        try:
            targets = load_competitor_targets(config_path=self._settings.config_path)
        except (FileNotFoundError, ValueError) as exc:
            raise ScanConfigurationError(str(exc)) from exc

        selected = CompetitorScanEngine.select_targets(
            targets=targets,
            competitors=[competitor] if competitor else None,
        )
        if not selected:
            raise ScanConfigurationError(f"No enabled competitors matched competitor={competitor!r}.")

        results = ScanResultsCollector()
        with PlaywrightPageFetcher(settings=self._settings) as fetcher, requests.Session() as session:
            robots_policy = None
            if self._settings.respect_robots:
                robots_policy = RobotsPolicyManager(
                    session=session,
                    user_agent=self._settings.user_agent,
                    timeout_seconds=self._settings.navigation_timeout_seconds,
                    allow_when_unreachable=self._settings.allow_when_robots_unreachable,
                )
            engine = CompetitorScanEngine(
                settings=self._settings,
                fetcher=fetcher,
                robots_policy=robots_policy,
            )
            engine.run(targets=selected, collector=results)

        artifacts = self._storage.store(results.results)
        return ScanRunReport(results=results, artifacts=artifacts)
