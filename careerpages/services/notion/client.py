"""
Low-level Notion REST client.

Used by NotionService and the client-backed children source. Returns typed
Pydantic models from careerpages.services.notion.models and hides HTTP
details. Read-only: only GET endpoints are wrapped.
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Dict, Iterator, List, Optional

import requests
from pydantic import ValidationError

from careerpages.exceptions import CareerPagesError

from .models import BlockBase, ChildrenPage, NotionPage

LOGGER = logging.getLogger(__name__)

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
PAGE_SIZE = 100


# ------------------------------- Errors --------------------------------------


class NotionError(CareerPagesError):
    """Base Notion transport error."""


class NotionAuthError(NotionError):
    """Token rejected or page not shared with the integration (401/403)."""


class NotionNotFound(NotionError):
    """404: unknown id, or not shared with the integration."""


class NotionRateLimited(NotionError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message)
        self.retry_after = retry_after


class NotionApiError(NotionError):
    """Catch-all API error."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload


# ------------------------------- Transport -----------------------------------


class _NotionHttp:
    """
    Minimal HTTP transport:
      - Bearer token + Notion-Version on every request (set on the session)
      - Upstream error messages surfaced in raised exceptions
      - Bounded debug dumps (CAREERPAGES_NOTION_DEBUG)
    """

    def __init__(self, base_url: str, session: requests.Session):
        self._base_url = base_url.rstrip("/")
        self._session = session
        LOGGER.debug("Initialized _NotionHttp with base_url: %s", self._base_url)

    @staticmethod
    def _error_message(code: int, body: object) -> str:
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {code}"

    def get(self, path: str, params: Optional[Dict[str, object]] = None) -> Dict:
        url = f"{self._base_url}{path}"
        LOGGER.info("GET %s", url)
        try:
            resp = self._session.get(url, params=params)
        except requests.RequestException as e:
            LOGGER.error("GET %s failed: %s", url, e)
            raise NotionApiError(f"Notion request failed: {e}") from e
        code = getattr(resp, "status_code", 0)
        LOGGER.debug("GET %s returned status %d", url, code)
        if code >= 400:
            self._dump_http_debug(path.strip("/").replace("/", "_"), url, params, resp)
            try:
                body = resp.json()
            except ValueError:
                body = getattr(resp, "text", None)
            message = self._error_message(code, body)
            if code in (401, 403):
                LOGGER.error("GET %s failed with auth error: %d", url, code)
                raise NotionAuthError(message)
            if code == 404:
                LOGGER.error("GET %s: not found", url)
                raise NotionNotFound(message)
            if code == 429:
                retry_after = None
                hdr = resp.headers.get("Retry-After")
                if hdr:
                    try:
                        retry_after = float(hdr)
                    except ValueError:
                        retry_after = None
                LOGGER.warning(
                    "GET %s was rate-limited. Retry after: %s", url, retry_after
                )
                raise NotionRateLimited(message, retry_after=retry_after)
            LOGGER.error("GET %s failed with code %d", url, code)
            raise NotionApiError(message, payload=body)
        try:
            return resp.json()
        except ValueError:
            self._dump_http_debug(path.strip("/").replace("/", "_"), url, params, resp)
            LOGGER.error("Failed to parse JSON response from %s", url)
            raise NotionApiError(
                "Invalid JSON response", payload=getattr(resp, "text", None)
            )

    @staticmethod
    def _dump_http_debug(op: str, url: str, params, resp) -> None:
        if not os.getenv("CAREERPAGES_NOTION_DEBUG"):
            return
        ts = time.strftime("%Y%m%d-%H%M%S")
        out_dir = os.path.join("workspace", "notion_debug")
        try:
            os.makedirs(out_dir, exist_ok=True)
            path = os.path.join(out_dir, f"{ts}_{op}_http_response.txt")
            body_text = getattr(resp, "text", None) or ""
            max_bytes = int(os.getenv("CAREERPAGES_DEBUG_MAX_BYTES", "524288"))
            if len(body_text) > max_bytes:
                body_text = body_text[:max_bytes] + "\n[truncated]\n"
            with open(path, "w", encoding="utf-8") as f:
                f.write(f"status={getattr(resp, 'status_code', None)}\nurl={url}\n")
                f.write(f"params={json.dumps(params or {})}\n\n{body_text}")
        except OSError:
            LOGGER.debug("Could not write Notion debug dump for %s", op)


# ------------------------------ Raw client -----------------------------------


class NotionClient:
    """
    Raw Notion client. Methods map 1:1 to REST endpoints:
      - GET /pages/{page_id}
      - GET /blocks/{block_id}/children
    """

    def __init__(
        self,
        token: str,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = NOTION_API_URL,
        notion_version: str = NOTION_VERSION,
    ):
        session = session if session is not None else requests.Session()
        session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Notion-Version": notion_version,
                "Accept": "application/json",
            }
        )
        self._http = _NotionHttp(base_url, session)
        LOGGER.debug("NotionClient initialized.")

    # ----- Pages -----

    def retrieve_page(self, page_id: str) -> NotionPage:
        LOGGER.info("Retrieving page %s", page_id)
        data = self._http.get(f"/pages/{page_id}")
        try:
            return NotionPage.model_validate(data)
        except ValidationError as e:
            LOGGER.error("Page response validation failed: %s", e)
            raise NotionApiError("Page response validation failed", payload=data)

    # ----- Block children (paged) -----

    def list_children_page(
        self,
        block_id: str,
        *,
        start_cursor: Optional[str] = None,
        page_size: int = PAGE_SIZE,
    ) -> ChildrenPage:
        params: Dict[str, object] = {"page_size": page_size}
        if start_cursor:
            params["start_cursor"] = start_cursor
        data = self._http.get(f"/blocks/{block_id}/children", params=params)
        try:
            return ChildrenPage.model_validate(data)
        except ValidationError as e:
            LOGGER.error("Children response validation failed: %s", e)
            raise NotionApiError("Children response validation failed", payload=data)

    def iter_children(
        self, block_id: str, *, page_size: int = PAGE_SIZE
    ) -> Iterator[ChildrenPage]:
        """Yield each page of children; the next page is requested only after
        the previous one returned its cursor."""
        cursor: Optional[str] = None
        page_num = 1
        while True:
            LOGGER.debug("Fetching children of %s, page %d", block_id, page_num)
            page = self.list_children_page(
                block_id, start_cursor=cursor, page_size=page_size
            )
            yield page
            cursor = page.next_cursor if page.has_more else None
            if not cursor:
                return
            page_num += 1

    def list_children(self, block_id: str) -> List[BlockBase]:
        out: List[BlockBase] = []
        for page in self.iter_children(block_id):
            out.extend(page.results)
        LOGGER.debug("Block %s has %d children", block_id, len(out))
        return out
