"""
Page fetcher abstraction for competitor scanning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.scraping.parsing import RenderedPage


class PageFetcher(ABC):
    """
    Retrieves rendered page content for a target URL.
    """

    @abstractmethod
    def fetch(self, url: str, *, timeout_seconds: float) -> RenderedPage:
        """
        Render `url` and return a snapshot of the settled page.

        Implementations raise on navigation failure or timeout.
        """
