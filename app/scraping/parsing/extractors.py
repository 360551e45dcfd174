"""
Raw content extraction from rendered competitor pages.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bs4 import Tag

from app.scraping.logging_utils import log_event
from app.scraping.parsing.html_parsers import RenderedPage, class_name, inner_markup, visible_text
from app.scraping.types import RawContentRecord

logger = logging.getLogger(__name__)

MAX_TARGETED_ELEMENTS = 20
MIN_ELEMENT_TEXT_LENGTH = 20
MAX_MARKUP_LENGTH = 1000

GENERIC_CONTAINER_SELECTOR = "article, .content, main, .post, .update, .release"
MIN_CONTAINER_TEXT_LENGTH = 50
MAX_CONTAINER_TEXT_LENGTH = 2000


class RawContentExtractor:
    """
    Targeted and generic strategies for turning page elements into raw records.
    """

    @classmethod
    def extract_targeted(
        cls,
        *,
        page: RenderedPage,
        elements: Sequence[Tag],
    ) -> list[RawContentRecord]:
        records: list[RawContentRecord] = []
        for index, element in enumerate(elements[:MAX_TARGETED_ELEMENTS]):
            try:
                text = visible_text(element).strip()
                if len(text) < MIN_ELEMENT_TEXT_LENGTH:
                    continue
                records.append(
                    RawContentRecord(
                        text=text,
                        html=inner_markup(element)[:MAX_MARKUP_LENGTH],
                        tag_name=cls._tag_name(element),
                        class_name=class_name(element),
                    )
                )
            except Exception as exc:
                log_event(
                    logger,
                    logging.WARNING,
                    "element_extraction_failed",
                    page_url=page.url,
                    element_index=index,
                    error=str(exc),
                )
        return records

    @classmethod
    def extract_generic(cls, *, page: RenderedPage) -> list[RawContentRecord]:
        """
        Fallback scan over common content containers.
        """

        records: list[RawContentRecord] = []
        for index, container in enumerate(page.query(GENERIC_CONTAINER_SELECTOR)):
            try:
                text = visible_text(container).strip()
                if len(text) < MIN_CONTAINER_TEXT_LENGTH:
                    continue
                records.append(
                    RawContentRecord(
                        text=text[:MAX_CONTAINER_TEXT_LENGTH],
                        html=inner_markup(container)[:MAX_MARKUP_LENGTH],
                        tag_name=cls._tag_name(container),
                        class_name=class_name(container),
                    )
                )
            except Exception as exc:
                log_event(
                    logger,
                    logging.WARNING,
                    "container_extraction_failed",
                    page_url=page.url,
                    container_index=index,
                    error=str(exc),
                )
        return records

    @staticmethod
    def _tag_name(node: Tag) -> str:
        return (node.name or "").upper()
