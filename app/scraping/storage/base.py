"""
Storage layer interfaces for scan reports.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from app.domain.competitor_scanning import CompetitorResult


@dataclass(frozen=True)
class ReportArtifacts:
    """
    Files written for one scan run, sharing one timestamp token.
    """

    timestamp: str
    json_path: Path
    csv_path: Path
    html_path: Path


class ReportStorage(ABC):
    """
    Storage abstraction for scan report output.
    """

    @abstractmethod
    def store(self, results: Sequence[CompetitorResult]) -> ReportArtifacts:
        """
        Persist the run's results and return the written artifacts.
        """
