"""
Scanning configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CompetitorTarget:
    """
    One competitor "what's new" page to scan.
    """

    key: str
    name: str
    url: str
    selector: str
    fallback_selectors: tuple[str, ...] = field(default_factory=tuple)
    enabled: bool = True

    @property
    def selectors(self) -> list[str]:
        """
        Primary selector first, then fallbacks in configured order.
        """

        return [self.selector, *self.fallback_selectors]


@dataclass(frozen=True)
class CompetitorScanSettings:
    """
    Runtime settings for competitor scanning.
    """

    config_path: str
    output_dir: str
    user_agent: str
    navigation_timeout_seconds: float
    settle_delay_seconds: float
    delay_between_targets_seconds: float
    headless: bool
    respect_robots: bool
    allow_when_robots_unreachable: bool
