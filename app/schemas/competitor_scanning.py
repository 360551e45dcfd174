"""
app/schemas/competitor_scanning.py

Serialization schemas for competitor scan reports.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.competitor_scanning import CompetitorResult, UpdateItem


class UpdateItemResponse(BaseModel):
    """
    Report model for one extracted update item.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    competitor: str
    title: str
    content: str
    full_content: str
    extracted_date: str | None = None
    is_likely_update: bool
    content_length: int = Field(..., ge=0)
    extracted_at: datetime

    @classmethod
    def from_domain(cls, item: UpdateItem) -> "UpdateItemResponse":
        return cls(
            id=item.id,
            competitor=item.competitor,
            title=item.title,
            content=item.content,
            full_content=item.full_content,
            extracted_date=item.extracted_date,
            is_likely_update=item.is_likely_update,
            content_length=item.content_length,
            extracted_at=item.extracted_at,
        )


class CompetitorResultResponse(BaseModel):
    """
    Report model for one competitor's scan outcome.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    competitor: str
    url: str
    scraped_at: datetime
    item_count: int = Field(..., ge=0)
    items: list[UpdateItemResponse] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def from_domain(cls, result: CompetitorResult) -> "CompetitorResultResponse":
        return cls(
            competitor=result.competitor,
            url=result.url,
            scraped_at=result.scraped_at,
            item_count=result.item_count,
            items=[UpdateItemResponse.from_domain(item) for item in result.items],
            error=result.error,
        )
