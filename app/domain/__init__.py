"""
app/domain package marker.
"""

from app.domain.competitor_scanning import CompetitorResult, ScanResultsCollector, UpdateItem

__all__ = [
    "CompetitorResult",
    "ScanResultsCollector",
    "UpdateItem",
]
