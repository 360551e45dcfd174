"""
Normalization layer exports.
"""

from app.scraping.normalization.update_normalizer import (
    UpdateNormalizer,
    derive_title,
    extract_date,
    is_likely_update,
)

__all__ = ["UpdateNormalizer", "derive_title", "extract_date", "is_likely_update"]
