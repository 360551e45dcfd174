"""
Shared scanning runtime data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import Tag


@dataclass(frozen=True)
class RawContentRecord:
    """
    Content captured from one page element before normalization.
    """

    text: str
    html: str
    tag_name: str
    class_name: str


@dataclass(frozen=True)
class SelectorMatch:
    """
    First selector in a chain that matched, with its elements.
    """

    selector: str
    elements: list[Tag] = field(default_factory=list)
