"""
Parsing layer exports.
"""

from app.scraping.parsing.extractors import RawContentExtractor
from app.scraping.parsing.html_parsers import RenderedPage, inner_markup, visible_text
from app.scraping.parsing.selection import (
    CssSelectorStrategy,
    build_selector_chain,
    first_matching_selector,
)

__all__ = [
    "CssSelectorStrategy",
    "RawContentExtractor",
    "RenderedPage",
    "build_selector_chain",
    "first_matching_selector",
    "inner_markup",
    "visible_text",
]
