"""
Document Renderer: Notion page URL -> HTML.

Public API:
  - NotionService.render_document(url) -> str
  - NotionService.render_document_page(url, title=None) -> str
  - NotionService.raw -> NotionClient (escape hatch)

A failed call anywhere in the tree fails the whole render; no partial markup
is returned.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from careerpages.config import SiteConfig

from .client import NotionClient
from .ids import require_page_id
from .models import NotionPage
from .rendering.datasource import NotionChildrenSource
from .rendering.options import RenderConfig
from .rendering.renderer import render_full_page, render_page_fragment

LOGGER = logging.getLogger(__name__)


class NotionService:
    def __init__(self, client: NotionClient, config: Optional[RenderConfig] = None):
        self._raw = client
        self.config = config or RenderConfig()

    @classmethod
    def from_config(
        cls, site_config: SiteConfig, render_config: Optional[RenderConfig] = None
    ) -> "NotionService":
        return cls(NotionClient(site_config.notion_token_or_raise()), render_config)

    @property
    def raw(self) -> NotionClient:
        return self._raw

    def _render(self, url: str) -> Tuple[NotionPage, str]:
        page_id = require_page_id(url)
        # Access check: fails fast with the API's own message (404/403)
        page = self._raw.retrieve_page(page_id)
        source = NotionChildrenSource(self._raw)
        top = source.get_children(page_id)
        fragment = render_page_fragment(top, source, self.config)
        LOGGER.info(
            "Rendered page %s: %d top-level blocks, %d child listings, %d chars",
            page_id,
            len(top),
            len(source.fetched_ids),
            len(fragment),
        )
        return page, fragment

    def render_document(self, url: str) -> str:
        """Render the page behind ``url`` to an HTML fragment."""
        return self._render(url)[1]

    def render_document_page(self, url: str, title: Optional[str] = None) -> str:
        """Render the page behind ``url`` to a standalone HTML document."""
        page, fragment = self._render(url)
        return render_full_page(title or page.title or "Untitled", fragment)
