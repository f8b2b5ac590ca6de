"""
Inline rendering of Notion rich text.

Each span is escaped first, then wrapped innermost-first: code, underline,
strikethrough, color, bold, italic, and finally the link. All composition goes
through ``Markup.format`` so any plain string is escaped exactly once.
"""

from __future__ import annotations

from typing import Iterable, Optional

from markupsafe import Markup, escape

from ..models import RichText
from .options import RenderConfig


def link_attrs(config: RenderConfig) -> Markup:
    """Safety attributes shared by inline links and bookmarks."""
    attrs = Markup("")
    if config.link_target_blank:
        attrs += Markup(' target="_blank"')
    if config.link_rel:
        attrs += Markup(' rel="{}"').format(config.link_rel)
    if config.referrer_policy:
        attrs += Markup(' referrerpolicy="{}"').format(config.referrer_policy)
    return attrs


def color_class(color: str) -> str:
    return color.replace("_", "-")


def render_span(span: RichText, config: Optional[RenderConfig] = None) -> Markup:
    config = config or RenderConfig()
    a = span.annotations
    out = escape(span.plain_text)

    if a.code:
        out = Markup('<code class="{}">{}</code>').format(config.cls("code-inline"), out)
    if a.underline:
        out = Markup('<span class="{}">{}</span>').format(config.cls("underline"), out)
    if a.strikethrough:
        out = Markup('<span class="{}">{}</span>').format(config.cls("strike"), out)
    if a.color and a.color != "default":
        out = Markup('<span class="{}">{}</span>').format(
            config.cls("color", color_class(a.color)), out
        )
    if a.bold:
        out = Markup("<strong>{}</strong>").format(out)
    if a.italic:
        out = Markup("<em>{}</em>").format(out)
    if span.href:
        out = Markup('<a href="{}"{}>{}</a>').format(span.href, link_attrs(config), out)
    return out


def render_rich_text(
    spans: Optional[Iterable[RichText]], config: Optional[RenderConfig] = None
) -> Markup:
    """Render a run of spans to one inline HTML string."""
    return Markup("").join(render_span(s, config) for s in spans or ())
