"""Public exports for Notion wire models."""

from __future__ import annotations

from .blocks import (
    Annotations,
    Block,
    BlockBase,
    BlockType,
    ChildrenPage,
    NotionPage,
    RichText,
    UnsupportedBlock,
    parse_block,
)

__all__ = [
    "Annotations",
    "Block",
    "BlockBase",
    "BlockType",
    "ChildrenPage",
    "NotionPage",
    "RichText",
    "UnsupportedBlock",
    "parse_block",
]
