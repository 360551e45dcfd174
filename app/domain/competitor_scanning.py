"""
app/domain/competitor_scanning.py

Domain models for competitor "what's new" scanning.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class UpdateItem:
    """
    One normalized update entry extracted from a competitor page.
    """

    id: str
    competitor: str
    title: str
    content: str
    full_content: str
    extracted_date: str | None
    is_likely_update: bool
    content_length: int
    extracted_at: datetime


@dataclass(frozen=True)
class CompetitorResult:
    """
    Outcome of scanning one competitor target.
    """

    competitor: str
    url: str
    scraped_at: datetime
    items: list[UpdateItem] = field(default_factory=list)
    error: str | None = None

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass
class ScanResultsCollector:
    """
    Append-only collection of competitor results for one scan run.
    """

    results: list[CompetitorResult] = field(default_factory=list)

    def add(self, result: CompetitorResult) -> None:
        self.results.append(result)

    def __iter__(self) -> Iterator[CompetitorResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def total_items(self) -> int:
        return sum(result.item_count for result in self.results)

    @property
    def failed_competitors(self) -> list[str]:
        return [result.competitor for result in self.results if result.error]
