"""
Ordered selector fallback chains for locating update content.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bs4 import Tag

from app.scraping.logging_utils import log_event
from app.scraping.parsing.html_parsers import RenderedPage
from app.scraping.types import SelectorMatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CssSelectorStrategy:
    """
    Look up elements on a page with one CSS selector.
    """

    selector: str

    def __call__(self, page: RenderedPage) -> list[Tag]:
        return page.query(self.selector)


def build_selector_chain(selectors: Sequence[str]) -> list[CssSelectorStrategy]:
    if not selectors:
        raise ValueError("At least one selector is required.")
    return [CssSelectorStrategy(selector) for selector in selectors]


def first_matching_selector(
    page: RenderedPage,
    strategies: Sequence[CssSelectorStrategy],
) -> SelectorMatch | None:
    """
    Evaluate strategies in order and return the first that finds elements.

    A strategy that raises counts as a non-match. Returns None when nothing
    in the chain matches.
    """

    for strategy in strategies:
        try:
            elements = strategy(page)
        except Exception as exc:
            log_event(
                logger,
                logging.WARNING,
                "selector_failed",
                page_url=page.url,
                selector=strategy.selector,
                error=str(exc),
            )
            continue

        if elements:
            log_event(
                logger,
                logging.INFO,
                "selector_matched",
                page_url=page.url,
                selector=strategy.selector,
                element_count=len(elements),
            )
            return SelectorMatch(selector=strategy.selector, elements=list(elements))

    return None
