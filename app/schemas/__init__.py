"""
app/schemas package marker.
"""

from app.schemas.competitor_scanning import CompetitorResultResponse, UpdateItemResponse

__all__ = [
    "CompetitorResultResponse",
    "UpdateItemResponse",
]
