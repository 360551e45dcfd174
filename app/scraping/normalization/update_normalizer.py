"""
Normalization layer turning raw page records into ranked update items.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timezone

from app.domain.competitor_scanning import UpdateItem
from app.scraping.types import RawContentRecord

MIN_CONTENT_LENGTH = 30
FINGERPRINT_LENGTH = 100
TITLE_MAX_LENGTH = 100
PREVIEW_MAX_LENGTH = 500
ELLIPSIS = "..."
NO_TITLE = "No title"

# Checked in order; the first family that matches wins.
DATE_PATTERNS = (
    re.compile(
        r"\b(?:January|February|March|April|May|June|July|August|September|October|"
        r"November|December)\s+\d{1,2},?\s+\d{4}\b",
        flags=re.IGNORECASE | re.ASCII,
    ),
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}\b", flags=re.ASCII),
    re.compile(r"\b\d{4}-\d{2}-\d{2}\b", flags=re.ASCII),
)
UPDATE_KEYWORDS_REGEX = re.compile(
    r"\b(?:new|update|release|feature|improvement|launch|announce|version|fix|enhancement)\b",
    flags=re.IGNORECASE | re.ASCII,
)


class UpdateNormalizer:
    """
    Dedupe, classify and rank raw content records for one competitor.
    """

    def normalize(
        self,
        *,
        records: Sequence[RawContentRecord],
        competitor_name: str,
        competitor_key: str | None = None,
        extracted_at: datetime | None = None,
    ) -> list[UpdateItem]:
        captured_at = extracted_at or datetime.now(timezone.utc)
        id_prefix = (competitor_key or competitor_name).lower()
        seen_fingerprints: set[str] = set()
        items: list[UpdateItem] = []

        # Ids use the pre-filter position, so rejected records still consume one.
        for index, record in enumerate(records):
            text = record.text.strip()
            if len(text) < MIN_CONTENT_LENGTH:
                continue

            fingerprint = text[:FINGERPRINT_LENGTH]
            if fingerprint in seen_fingerprints:
                continue
            seen_fingerprints.add(fingerprint)

            items.append(
                UpdateItem(
                    id=f"{id_prefix}_{index}",
                    competitor=competitor_name,
                    title=derive_title(text),
                    content=content_preview(text),
                    full_content=text,
                    extracted_date=extract_date(text),
                    is_likely_update=is_likely_update(text),
                    content_length=len(text),
                    extracted_at=captured_at,
                )
            )

        return rank_items(items)


def extract_date(text: str) -> str | None:
    for pattern in DATE_PATTERNS:
        match = pattern.search(text)
        if match is not None:
            return match.group(0)
    return None


def is_likely_update(text: str) -> bool:
    return UPDATE_KEYWORDS_REGEX.search(text) is not None


def derive_title(text: str) -> str:
    """
    First non-blank line, capped at TITLE_MAX_LENGTH characters.
    """

    for line in text.split("\n"):
        title = line.strip()
        if title:
            return _truncate(title, TITLE_MAX_LENGTH)
    return NO_TITLE


def content_preview(text: str) -> str:
    return _truncate(text, PREVIEW_MAX_LENGTH)


def rank_items(items: Sequence[UpdateItem]) -> list[UpdateItem]:
    """
    Likely updates first, then longer content; stable for ties.
    """

    return sorted(items, key=lambda item: (not item.is_likely_update, -item.content_length))


def _truncate(value: str, limit: int) -> str:
    if len(value) > limit:
        return value[:limit] + ELLIPSIS
    return value
