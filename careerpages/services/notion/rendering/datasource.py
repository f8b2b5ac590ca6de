"""
Notion-API-backed ChildrenSource implementation.

Wraps a NotionClient for the duration of one render. Children are listed
lazily on first request and remembered by block id, so each block's children
are fetched (all pages, in order) at most once per render. Create a new
instance per request: hosted file URLs inside the cached blocks expire.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..client import NotionClient
from ..models import BlockBase
from .renderer_iface import ChildrenSource

LOGGER = logging.getLogger(__name__)


@dataclass
class NotionChildrenSource(ChildrenSource):
    client: NotionClient
    _children: Dict[str, List[BlockBase]] = field(default_factory=dict)

    def get_children(self, block_id: str) -> List[BlockBase]:
        cached = self._children.get(block_id)
        if cached is None:
            cached = self.client.list_children(block_id)
            self._children[block_id] = cached
        else:
            LOGGER.debug("Children of %s served from render cache", block_id)
        return list(cached)

    @property
    def fetched_ids(self) -> List[str]:
        return list(self._children)
