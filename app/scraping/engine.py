"""
Competitor scanning engine.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from app.domain.competitor_scanning import CompetitorResult, ScanResultsCollector
from app.scraping.base import PageFetcher
from app.scraping.config import load_competitor_targets
from app.scraping.config.models import CompetitorScanSettings, CompetitorTarget
from app.scraping.logging_utils import log_event
from app.scraping.normalization import UpdateNormalizer
from app.scraping.parsing import RawContentExtractor, build_selector_chain, first_matching_selector
from app.scraping.robots import RobotsPolicyManager
from app.scraping.types import RawContentRecord

logger = logging.getLogger(__name__)


class CompetitorScanEngine:
    """
    Scans configured competitor targets one after another.
    """

    def __init__(
        self,
        *,
        settings: CompetitorScanSettings,
        fetcher: PageFetcher,
        robots_policy: RobotsPolicyManager | None = None,
        normalizer: UpdateNormalizer | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self._robots_policy = robots_policy
        self._normalizer = normalizer or UpdateNormalizer()
        self._sleep = sleep

    def run(
        self,
        *,
        competitors: Sequence[str] | None = None,
        targets: Sequence[CompetitorTarget] | None = None,
        collector: ScanResultsCollector | None = None,
    ) -> ScanResultsCollector:
        if targets is None:
            targets = load_competitor_targets(config_path=self._settings.config_path)
        selected = self.select_targets(targets=targets, competitors=competitors)
        if not selected:
            raise ValueError("No enabled competitors matched the run criteria.")

        results = collector if collector is not None else ScanResultsCollector()
        for position, target in enumerate(selected):
            results.add(self.scan_target(target))
            if position < len(selected) - 1 and self._settings.delay_between_targets_seconds > 0:
                self._sleep(self._settings.delay_between_targets_seconds)
        return results

    def scan_target(self, target: CompetitorTarget) -> CompetitorResult:
        """
        Run the full pipeline for one target; failures become an error result.
        """

        try:
            if self._robots_policy is not None and not self._robots_policy.can_fetch(target.url):
                raise PermissionError(f"Blocked by robots.txt url={target.url}")

            page = self._fetcher.fetch(
                target.url,
                timeout_seconds=self._settings.navigation_timeout_seconds,
            )
            match = first_matching_selector(page, build_selector_chain(target.selectors))
            records: list[RawContentRecord] = []
            if match is not None:
                records = RawContentExtractor.extract_targeted(page=page, elements=match.elements)
            if not records:
                log_event(
                    logger,
                    logging.WARNING,
                    "generic_fallback_used",
                    competitor=target.name,
                    matched_selector=match.selector if match else None,
                )
                records = RawContentExtractor.extract_generic(page=page)

            items = self._normalizer.normalize(
                records=records,
                competitor_name=target.name,
                competitor_key=target.key,
            )
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            log_event(
                logger,
                logging.ERROR,
                "target_scan_failed",
                competitor=target.name,
                url=target.url,
                error=message,
            )
            return CompetitorResult(
                competitor=target.name,
                url=target.url,
                scraped_at=datetime.now(timezone.utc),
                error=message,
            )

        log_event(
            logger,
            logging.INFO,
            "target_scan_completed",
            competitor=target.name,
            raw_records=len(records),
            item_count=len(items),
        )
        return CompetitorResult(
            competitor=target.name,
            url=target.url,
            scraped_at=datetime.now(timezone.utc),
            items=items,
        )

    @staticmethod
    def select_targets(
        *,
        targets: Sequence[CompetitorTarget],
        competitors: Sequence[str] | None,
    ) -> list[CompetitorTarget]:
        enabled = [target for target in targets if target.enabled]
        if not competitors:
            return enabled

        normalized = {item.strip().lower() for item in competitors if item.strip()}
        if not normalized:
            return enabled
        return [
            target
            for target in enabled
            if target.key.lower() in normalized or target.name.lower() in normalized
        ]
