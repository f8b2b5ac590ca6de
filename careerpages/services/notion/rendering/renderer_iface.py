"""
Transport-agnostic renderer interface for Notion pages.

Defines the single seam (`ChildrenSource`) the renderer needs to walk a page:
listing the children of a block (or of the page itself) by id. Pagination is
the source's concern; the renderer only ever sees complete, ordered lists.

The renderer never performs I/O itself; it only calls this interface, so tests
can pass an in-memory mapping instead of a live client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, Sequence

from ..models import BlockBase


class ChildrenSource(Protocol):
    """Minimal datasource required by the renderer."""

    def get_children(self, block_id: str) -> List[BlockBase]: ...


@dataclass
class StaticChildrenSource(ChildrenSource):
    """In-memory source keyed by parent id; unknown ids have no children."""

    children: Dict[str, Sequence[BlockBase]] = field(default_factory=dict)

    def get_children(self, block_id: str) -> List[BlockBase]:
        return list(self.children.get(block_id, ()))
