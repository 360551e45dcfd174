"""
Config helpers for competitor scanning.
"""

from app.scraping.config.loader import get_competitor_scan_settings, load_competitor_targets
from app.scraping.config.models import CompetitorScanSettings, CompetitorTarget

__all__ = [
    "CompetitorScanSettings",
    "CompetitorTarget",
    "get_competitor_scan_settings",
    "load_competitor_targets",
]
