from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    CAREERPAGES_NOTION_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> ignore

    Notion payloads carry many fields the renderer never reads (timestamps,
    parents, created_by, ...), so the default drops them.
    """
    raw = (os.getenv("CAREERPAGES_NOTION_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "ignore"

    return default


_EXTRA = _env_extra_mode()


class NotionModel(BaseModel):
    """
    Project-wide base model for Notion wire objects.

    Instances are immutable; they are rebuilt from the API on every request.
    Switch strictness at runtime by setting an env var before import:
      export CAREERPAGES_NOTION_EXTRA=forbid
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        frozen=True,
    )


__all__ = ["NotionModel", "_env_extra_mode"]
