"""
app/services package marker.
"""

from app.services.competitor_scanning_service import (
    CompetitorScanningService,
    ScanConfigurationError,
    ScanRunReport,
)

__all__ = [
    "CompetitorScanningService",
    "ScanConfigurationError",
    "ScanRunReport",
]
