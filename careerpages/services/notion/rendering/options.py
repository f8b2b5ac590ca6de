"""
Render configuration for Notion HTML output.

Centralizes markup flags so callers can tune defaults without touching core
logic. The defaults match the stylesheet shipped with the site front-end
(every class carries the ``ntn-`` prefix).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    class_prefix: str = "ntn-"

    # Link behavior (inline links and bookmarks)
    link_target_blank: bool = True
    link_rel: str = "noopener noreferrer"
    referrer_policy: str = "no-referrer"

    # Code blocks without a language tag
    default_code_language: str = "plain"

    def cls(self, *names: str) -> str:
        """Prefixed CSS class list, e.g. cls("li", "bullet") -> "ntn-li ntn-bullet"."""
        return " ".join(f"{self.class_prefix}{n}" for n in names)
