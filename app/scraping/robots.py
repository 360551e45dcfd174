"""
robots.txt policy helper for scanner compliance.
"""

from __future__ import annotations

import logging
from urllib.parse import urljoin, urlparse
from urllib.robotparser import RobotFileParser

import requests

from app.scraping.logging_utils import log_event

logger = logging.getLogger(__name__)


class RobotsPolicyManager:
    """
    Caches robots.txt rules per origin and answers access checks.
    """

    def __init__(
        self,
        *,
        session: requests.Session,
        user_agent: str,
        timeout_seconds: float = 10.0,
        allow_when_unreachable: bool = True,
    ) -> None:
        self._session = session
        self._user_agent = user_agent
        self._timeout_seconds = timeout_seconds
        self._allow_when_unreachable = allow_when_unreachable
        self._cache: dict[str, RobotFileParser] = {}

    def can_fetch(self, url: str) -> bool:
        return self._parser_for(url).can_fetch(self._user_agent, url)

    def _parser_for(self, url: str) -> RobotFileParser:
        origin = self._origin(url)
        cached = self._cache.get(origin)
        if cached is not None:
            return cached

        parser = RobotFileParser()
        robots_url = urljoin(origin, "/robots.txt")
        try:
            response = self._session.get(
                robots_url,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            self._apply_fallback_policy(parser)
            log_event(
                logger,
                logging.WARNING,
                "robots_fetch_failed",
                origin=origin,
                fallback_allow=self._allow_when_unreachable,
                error=str(exc),
            )
        else:
            if response.ok and response.text:
                parser.set_url(robots_url)
                parser.parse(response.text.splitlines())
                log_event(logger, logging.INFO, "robots_loaded", origin=origin)
            elif response.status_code in (401, 403):
                parser.parse(["User-agent: *", "Disallow: /"])
                log_event(
                    logger,
                    logging.WARNING,
                    "robots_forbidden",
                    origin=origin,
                    status_code=response.status_code,
                )
            else:
                # A missing robots.txt places no restrictions.
                parser.parse(["User-agent: *", "Allow: /"])
                log_event(
                    logger,
                    logging.INFO,
                    "robots_absent",
                    origin=origin,
                    status_code=response.status_code,
                )

        self._cache[origin] = parser
        return parser

    def _apply_fallback_policy(self, parser: RobotFileParser) -> None:
        rule = "Allow: /" if self._allow_when_unreachable else "Disallow: /"
        parser.parse(["User-agent: *", rule])

    @staticmethod
    def _origin(url: str) -> str:
        parsed = urlparse(url)
        scheme = parsed.scheme or "https"
        return f"{scheme}://{parsed.netloc}"
