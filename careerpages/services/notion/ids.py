"""Notion page id extraction from share/browser URLs."""

from __future__ import annotations

import re
from typing import Optional

from careerpages.exceptions import InvalidDocumentReference

# A bare 32-hex id anywhere (".../Title-<id>?pvs=4"), or a hyphenated uuid that
# ends the string.
_PAGE_ID_RE = re.compile(
    r"[0-9a-f]{32}|[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def canonical_id(raw: str) -> str:
    """Format 32 hex characters as 8-4-4-4-12."""
    raw = raw.replace("-", "").lower()
    return f"{raw[:8]}-{raw[8:12]}-{raw[12:16]}-{raw[16:20]}-{raw[20:]}"


def extract_page_id(url: object) -> Optional[str]:
    """Return the canonical page id embedded in ``url``, or None."""
    m = _PAGE_ID_RE.search(str(url or ""))
    if not m:
        return None
    return canonical_id(m.group(0))


def require_page_id(url: object) -> str:
    page_id = extract_page_id(url)
    if page_id is None:
        raise InvalidDocumentReference(str(url or ""))
    return page_id
