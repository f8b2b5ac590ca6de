"""
Pure renderer for Notion pages.

Converts a page's block tree into a semantic HTML fragment. All I/O goes
through the injected `ChildrenSource`; children are requested lazily, only for
blocks that declare them or whose kind always keeps its content in children
(toggle, table, column_list/column, synced_block).
"""

from __future__ import annotations

import html
import logging
from itertools import groupby
from typing import Dict, List, Optional, Sequence

from markupsafe import Markup

from ..models import BlockBase, BlockType
from ..models.blocks import plain_text_of, text_content_of
from .inline import link_attrs, render_rich_text
from .options import RenderConfig
from .renderer_iface import ChildrenSource
from .table_builder import render_table

LOGGER = logging.getLogger(__name__)

_LIST_TAGS: Dict[str, str] = {
    BlockType.BULLETED_LIST_ITEM.value: "ul",
    BlockType.NUMBERED_LIST_ITEM.value: "ol",
}


class BlockRenderer:
    """Render blocks fetched through ``source`` into HTML."""

    # Every BlockType has an entry; anything else renders to nothing.
    _DISPATCH: Dict[str, str] = {
        BlockType.HEADING_1.value: "_render_heading",
        BlockType.HEADING_2.value: "_render_heading",
        BlockType.HEADING_3.value: "_render_heading",
        BlockType.PARAGRAPH.value: "_render_paragraph",
        BlockType.BULLETED_LIST_ITEM.value: "_render_list_item",
        BlockType.NUMBERED_LIST_ITEM.value: "_render_list_item",
        BlockType.TO_DO.value: "_render_to_do",
        BlockType.TOGGLE.value: "_render_toggle",
        BlockType.CALLOUT.value: "_render_callout",
        BlockType.QUOTE.value: "_render_quote",
        BlockType.CODE.value: "_render_code",
        BlockType.DIVIDER.value: "_render_divider",
        BlockType.IMAGE.value: "_render_image",
        BlockType.BOOKMARK.value: "_render_bookmark",
        BlockType.EQUATION.value: "_render_equation",
        BlockType.TABLE.value: "_render_table",
        # Rows and columns only make sense inside their parent
        BlockType.TABLE_ROW.value: "_render_nothing",
        BlockType.COLUMN.value: "_render_nothing",
        BlockType.COLUMN_LIST.value: "_render_column_list",
        BlockType.SYNCED_BLOCK.value: "_render_synced",
    }

    def __init__(self, source: ChildrenSource, config: Optional[RenderConfig] = None):
        self.source = source
        self.config = config or RenderConfig()

    # ------------------------------------------------------------------ core

    def render_blocks(self, blocks: Sequence[BlockBase]) -> Markup:
        """Render a sibling sequence, merging runs of list items into one list."""
        out: List[Markup] = []
        for kind, run in groupby(blocks, key=lambda b: b.type):
            if kind in _LIST_TAGS:
                out.append(self._list_container(kind, list(run)))
            else:
                out.extend(self.render_block(b) for b in run)
        return Markup("").join(out)

    def render_block(self, block: BlockBase) -> Markup:
        handler = self._DISPATCH.get(block.type)
        if handler is None:
            LOGGER.debug("Skipping unsupported block %s (%s)", block.id, block.type)
            return Markup("")
        return getattr(self, handler)(block)

    def render_children_if_any(self, block: BlockBase) -> Markup:
        if not block.has_children:
            return Markup("")
        kids = self.source.get_children(block.id)
        kinds = {k.type for k in kids}
        if len(kinds) == 1:
            (kind,) = kinds
            if kind in _LIST_TAGS:
                return self._list_container(kind, kids)
        return self.render_blocks(kids)

    def _list_container(self, kind: str, items: Sequence[BlockBase]) -> Markup:
        tag = _LIST_TAGS[kind]
        inner = Markup("").join(self.render_block(b) for b in items)
        return Markup('<{0} class="{1}">{2}</{0}>').format(
            Markup(tag), self.config.cls(tag), inner
        )

    def _text(self, block: BlockBase) -> Markup:
        content = text_content_of(block)
        return render_rich_text(content.rich_text if content else (), self.config)

    # -------------------------------------------------------------- handlers

    def _render_nothing(self, block: BlockBase) -> Markup:
        return Markup("")

    def _render_heading(self, block: BlockBase) -> Markup:
        level = block.type[-1]
        return Markup('<h{0} class="{1}">{2}</h{0}>').format(
            Markup(level), self.config.cls(f"h{level}"), self._text(block)
        )

    def _render_paragraph(self, block: BlockBase) -> Markup:
        text = self._text(block)
        if text:
            return Markup('<p class="{}">{}</p>').format(self.config.cls("p"), text)
        return Markup('<div class="{}"></div>').format(self.config.cls("spacer"))

    def _render_list_item(self, block: BlockBase) -> Markup:
        marker = "bullet" if block.type == BlockType.BULLETED_LIST_ITEM.value else "number"
        return Markup('<li class="{}">{}{}</li>').format(
            self.config.cls("li", marker),
            self._text(block),
            self.render_children_if_any(block),
        )

    def _render_to_do(self, block: BlockBase) -> Markup:
        checked = Markup(" checked") if block.to_do.checked else Markup("")
        return Markup(
            '<div class="{}"><label><input type="checkbox"{} disabled> {}</label>{}</div>'
        ).format(
            self.config.cls("todo"),
            checked,
            self._text(block),
            self.render_children_if_any(block),
        )

    def _render_toggle(self, block: BlockBase) -> Markup:
        summary = self._text(block)
        inner = self.render_blocks(self.source.get_children(block.id))
        return Markup('<details class="{}"><summary>{}</summary>{}</details>').format(
            self.config.cls("toggle"), summary, inner
        )

    def _render_callout(self, block: BlockBase) -> Markup:
        icon = block.callout.icon
        icon_html = Markup("")
        if icon is not None and icon.emoji:
            icon_html = Markup('<span class="{}">{}</span>').format(
                self.config.cls("callout-icon"), icon.emoji
            )
        return Markup('<div class="{}">{}<div>{}</div>{}</div>').format(
            self.config.cls("callout"),
            icon_html,
            self._text(block),
            self.render_children_if_any(block),
        )

    def _render_quote(self, block: BlockBase) -> Markup:
        return Markup('<blockquote class="{}">{}</blockquote>').format(
            self.config.cls("quote"), self._text(block)
        )

    def _render_code(self, block: BlockBase) -> Markup:
        # Verbatim source: annotations are ignored inside code blocks
        language = block.code.language or self.config.default_code_language
        source = plain_text_of(block.code.rich_text)
        return Markup('<pre class="{}"><code data-lang="{}">{}</code></pre>').format(
            self.config.cls("codeblock"), language, source
        )

    def _render_divider(self, block: BlockBase) -> Markup:
        return Markup('<hr class="{}">').format(self.config.cls("hr"))

    def _render_image(self, block: BlockBase) -> Markup:
        image = block.image
        src = image.source_url
        img = Markup("")
        if src:
            img = Markup('<img class="{}" src="{}" alt="">').format(
                self.config.cls("img"), src
            )
        caption = render_rich_text(image.caption, self.config)
        figcaption = Markup("")
        if caption:
            figcaption = Markup('<figcaption class="{}">{}</figcaption>').format(
                self.config.cls("figcap"), caption
            )
        return Markup('<figure class="{}">{}{}</figure>').format(
            self.config.cls("figure"), img, figcaption
        )

    def _render_bookmark(self, block: BlockBase) -> Markup:
        url = block.bookmark.url
        return Markup('<a class="{}" href="{}"{}>{}</a>').format(
            self.config.cls("bookmark"), url, link_attrs(self.config), url
        )

    def _render_equation(self, block: BlockBase) -> Markup:
        return Markup('<div class="{}">{}</div>').format(
            self.config.cls("equation"), block.equation.expression
        )

    def _render_table(self, block: BlockBase) -> Markup:
        children = self.source.get_children(block.id)
        return render_table(
            block,
            children,
            lambda cell: render_rich_text(cell, self.config),
            css_class=self.config.cls("table"),
        )

    def _render_column_list(self, block: BlockBase) -> Markup:
        columns = self.source.get_children(block.id)
        parts = [
            Markup('<div class="{}">{}</div>').format(
                self.config.cls("column"),
                self.render_blocks(self.source.get_children(col.id)),
            )
            for col in columns
        ]
        return Markup('<div class="{}">{}</div>').format(
            self.config.cls("columns"), Markup("").join(parts)
        )

    def _render_synced(self, block: BlockBase) -> Markup:
        return self.render_blocks(self.source.get_children(block.id))


def render_page_fragment(
    blocks: Sequence[BlockBase],
    source: ChildrenSource,
    config: Optional[RenderConfig] = None,
) -> str:
    """Render top-level ``blocks`` (and their subtrees) to an HTML fragment."""
    return str(BlockRenderer(source, config).render_blocks(blocks))


def render_full_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    """Wrap a rendered fragment in a standalone document (CLI exports)."""
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;"
        "line-height:1.5;max-width:46rem;margin:2rem auto;padding:0 1rem}"
        ".ntn-spacer{height:1em}"
        ".ntn-quote{margin:.5em 0;padding-left:.8em;border-left:3px solid #ddd}"
        ".ntn-callout{display:flex;gap:.5em;padding:.75em;border-radius:6px;background:#f1f1ef}"
        ".ntn-codeblock{white-space:pre-wrap;background:#f7f6f3;padding:.75em;border-radius:4px}"
        ".ntn-code-inline{background:#f0efed;padding:0 .2em;border-radius:3px}"
        ".ntn-underline{text-decoration:underline}"
        ".ntn-strike{text-decoration:line-through}"
        ".ntn-img{max-width:100%;height:auto}"
        ".ntn-table{border-collapse:collapse;margin:.5rem 0}"
        ".ntn-table td,.ntn-table th{border:1px solid #ccc;padding:.25rem .5rem;vertical-align:top}"
        ".ntn-columns{display:flex;gap:1.5em}.ntn-column{flex:1;min-width:0}"
        ".ntn-equation{font-family:monospace;text-align:center}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        ".ntn-callout{background:#262626}"
        ".ntn-codeblock,.ntn-code-inline{background:#1b1b1b}"
        ".ntn-table td,.ntn-table th{border-color:#555}"
        "}"
        f'{extra_css}</style><div class="ntn-page">{html_fragment}</div>'
    )
