"""Public API for the Notion document renderer."""

from .client import (
    NotionApiError,
    NotionAuthError,
    NotionClient,
    NotionError,
    NotionNotFound,
    NotionRateLimited,
)
from .ids import extract_page_id, require_page_id
from .rendering.options import RenderConfig
from .rendering.renderer import BlockRenderer, render_page_fragment
from .service import NotionService

__all__ = [
    "NotionService",
    "NotionClient",
    "NotionError",
    "NotionApiError",
    "NotionAuthError",
    "NotionNotFound",
    "NotionRateLimited",
    "BlockRenderer",
    "RenderConfig",
    "extract_page_id",
    "require_page_id",
    "render_page_fragment",
]
