"""
Notion "wire" models for pages, blocks and children listings.

- Rich text spans + annotations
- One model per supported block kind, tagged by `type`
- A passthrough model for any kind this package does not render yet
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, JsonValue, TypeAdapter, field_validator

from ._base import NotionModel

# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------


class Annotations(NotionModel):
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class RichText(NotionModel):
    """One run of text with its own formatting and optional link."""

    type: Optional[str] = None  # "text" | "mention" | "equation"
    plain_text: str = ""
    href: Optional[str] = None
    annotations: Annotations = Field(default_factory=Annotations)


def plain_text_of(spans: List[RichText]) -> str:
    return "".join(s.plain_text for s in spans)


# ---------------------------------------------------------------------------
# Block payloads (the object stored under block[block.type])
# ---------------------------------------------------------------------------


class TextContent(NotionModel):
    rich_text: List[RichText] = Field(default_factory=list)
    color: str = "default"


class HeadingContent(TextContent):
    is_toggleable: bool = False


class ToDoContent(TextContent):
    checked: bool = False


class Icon(NotionModel):
    type: Optional[str] = None
    emoji: Optional[str] = None


class CalloutContent(TextContent):
    icon: Optional[Icon] = None


class CodeContent(TextContent):
    language: Optional[str] = None
    caption: List[RichText] = Field(default_factory=list)


class FileUrl(NotionModel):
    url: str = ""
    # Only present on Notion-hosted files; signed URLs expire about an hour
    # after the listing call.
    expiry_time: Optional[str] = None


class FileContent(NotionModel):
    type: Optional[str] = None  # "external" | "file"
    external: Optional[FileUrl] = None
    file: Optional[FileUrl] = None
    caption: List[RichText] = Field(default_factory=list)

    @property
    def source_url(self) -> Optional[str]:
        if self.type == "external":
            return self.external.url if self.external else None
        return self.file.url if self.file else None

    @property
    def is_hosted(self) -> bool:
        return self.type != "external"


class BookmarkContent(NotionModel):
    url: str = ""
    caption: List[RichText] = Field(default_factory=list)


class EquationContent(NotionModel):
    expression: str = ""


class TableContent(NotionModel):
    table_width: int = 0
    has_column_header: bool = False
    has_row_header: bool = False


class TableRowContent(NotionModel):
    cells: List[List[RichText]] = Field(default_factory=list)


class EmptyContent(NotionModel):
    """Payload for blocks whose content lives entirely in their children."""


class SyncedContent(NotionModel):
    # None for the original block; {"type": "block_id", "block_id": ...} for copies
    synced_from: Optional[Dict[str, JsonValue]] = None


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class BlockType(str, Enum):
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    PARAGRAPH = "paragraph"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    TOGGLE = "toggle"
    CALLOUT = "callout"
    QUOTE = "quote"
    CODE = "code"
    DIVIDER = "divider"
    IMAGE = "image"
    BOOKMARK = "bookmark"
    EQUATION = "equation"
    TABLE = "table"
    TABLE_ROW = "table_row"
    COLUMN_LIST = "column_list"
    COLUMN = "column"
    SYNCED_BLOCK = "synced_block"


class BlockBase(NotionModel):
    object: Optional[str] = None
    id: str
    type: str
    has_children: bool = False


class Heading1Block(BlockBase):
    type: Literal["heading_1"]
    heading_1: HeadingContent = Field(default_factory=HeadingContent)


class Heading2Block(BlockBase):
    type: Literal["heading_2"]
    heading_2: HeadingContent = Field(default_factory=HeadingContent)


class Heading3Block(BlockBase):
    type: Literal["heading_3"]
    heading_3: HeadingContent = Field(default_factory=HeadingContent)


class ParagraphBlock(BlockBase):
    type: Literal["paragraph"]
    paragraph: TextContent = Field(default_factory=TextContent)


class BulletedListItemBlock(BlockBase):
    type: Literal["bulleted_list_item"]
    bulleted_list_item: TextContent = Field(default_factory=TextContent)


class NumberedListItemBlock(BlockBase):
    type: Literal["numbered_list_item"]
    numbered_list_item: TextContent = Field(default_factory=TextContent)


class ToDoBlock(BlockBase):
    type: Literal["to_do"]
    to_do: ToDoContent = Field(default_factory=ToDoContent)


class ToggleBlock(BlockBase):
    type: Literal["toggle"]
    toggle: TextContent = Field(default_factory=TextContent)


class CalloutBlock(BlockBase):
    type: Literal["callout"]
    callout: CalloutContent = Field(default_factory=CalloutContent)


class QuoteBlock(BlockBase):
    type: Literal["quote"]
    quote: TextContent = Field(default_factory=TextContent)


class CodeBlock(BlockBase):
    type: Literal["code"]
    code: CodeContent = Field(default_factory=CodeContent)


class DividerBlock(BlockBase):
    type: Literal["divider"]
    divider: EmptyContent = Field(default_factory=EmptyContent)


class ImageBlock(BlockBase):
    type: Literal["image"]
    image: FileContent = Field(default_factory=FileContent)


class BookmarkBlock(BlockBase):
    type: Literal["bookmark"]
    bookmark: BookmarkContent = Field(default_factory=BookmarkContent)


class EquationBlock(BlockBase):
    type: Literal["equation"]
    equation: EquationContent = Field(default_factory=EquationContent)


class TableBlock(BlockBase):
    type: Literal["table"]
    table: TableContent = Field(default_factory=TableContent)


class TableRowBlock(BlockBase):
    type: Literal["table_row"]
    table_row: TableRowContent = Field(default_factory=TableRowContent)


class ColumnListBlock(BlockBase):
    type: Literal["column_list"]
    column_list: EmptyContent = Field(default_factory=EmptyContent)


class ColumnBlock(BlockBase):
    type: Literal["column"]
    column: EmptyContent = Field(default_factory=EmptyContent)


class SyncedBlock(BlockBase):
    type: Literal["synced_block"]
    synced_block: SyncedContent = Field(default_factory=SyncedContent)


class UnsupportedBlock(BlockBase):
    """Any block kind not modeled above (child_page, embed, video, ...).

    Keeps the raw payload under its own key so callers can still inspect it.
    """

    model_config = NotionModel.model_config | ConfigDict(extra="allow")


KnownBlock = Annotated[
    Union[
        Heading1Block,
        Heading2Block,
        Heading3Block,
        ParagraphBlock,
        BulletedListItemBlock,
        NumberedListItemBlock,
        ToDoBlock,
        ToggleBlock,
        CalloutBlock,
        QuoteBlock,
        CodeBlock,
        DividerBlock,
        ImageBlock,
        BookmarkBlock,
        EquationBlock,
        TableBlock,
        TableRowBlock,
        ColumnListBlock,
        ColumnBlock,
        SyncedBlock,
    ],
    Field(discriminator="type"),
]

Block = Union[KnownBlock, UnsupportedBlock]

KNOWN_BLOCK_TYPES: frozenset[str] = frozenset(t.value for t in BlockType)

_KNOWN_BLOCK_ADAPTER: TypeAdapter = TypeAdapter(KnownBlock)


def parse_block(obj) -> BlockBase:
    """Validate one raw block dict into its typed model.

    Unknown `type` tags fall back to `UnsupportedBlock` instead of failing, so
    a page using a newer block kind still renders.
    """
    if isinstance(obj, BlockBase):
        return obj
    t = obj.get("type") if isinstance(obj, dict) else None
    if t in KNOWN_BLOCK_TYPES:
        return _KNOWN_BLOCK_ADAPTER.validate_python(obj)
    return UnsupportedBlock.model_validate(obj)


def text_content_of(block: BlockBase) -> Optional[TextContent]:
    """Return the rich-text payload for text-bearing blocks, else None."""
    payload = getattr(block, block.type, None)
    return payload if isinstance(payload, TextContent) else None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ChildrenPage(NotionModel):
    """
    One page of GET /blocks/{id}/children:
    - results: typed blocks, in document order
    - next_cursor: continuation token (present while has_more)
    """

    object: Optional[str] = None
    results: List[BlockBase] = Field(default_factory=list)
    next_cursor: Optional[str] = None
    has_more: bool = False

    @field_validator("results", mode="before")
    @classmethod
    def _coerce_results(cls, v):
        if isinstance(v, list):
            return [parse_block(item) for item in v]
        return v


class NotionPage(NotionModel):
    """Subset of GET /pages/{id} used to confirm access and title exports."""

    object: Optional[str] = None
    id: str
    url: Optional[str] = None
    archived: bool = False
    properties: Dict[str, JsonValue] = Field(default_factory=dict)

    @property
    def title(self) -> Optional[str]:
        for prop in self.properties.values():
            if isinstance(prop, dict) and prop.get("type") == "title":
                spans = prop.get("title") or []
                text = "".join(
                    str(s.get("plain_text", "")) for s in spans if isinstance(s, dict)
                )
                return text or None
        return None
