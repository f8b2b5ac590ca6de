"""
Process-wide configuration for the careers site backend.

Built once at startup (`SiteConfig.from_env()`) and passed explicitly into the
web app, the CLI and both services. Secrets are kept as raw strings and only
parsed on demand; errors raised from here name the variable, never its value.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

LOGGER = logging.getLogger(__name__)

ENV_NOTION_TOKEN = "NOTION_TOKEN"
ENV_SERVICE_ACCOUNT = "GOOGLE_SERVICE_ACCOUNT_JSON"
ENV_SHEET_ID = "SHEET_ID"
ENV_CORS_ORIGIN = "CAREERPAGES_CORS_ORIGIN"
ENV_LOG_LEVEL = "CAREERPAGES_LOG_LEVEL"


@dataclass(frozen=True)
class SiteConfig:
    notion_token: Optional[str] = field(default=None, repr=False)
    service_account_json: Optional[str] = field(default=None, repr=False)
    sheet_id: Optional[str] = None

    # Optional: emitted as Access-Control-Allow-Origin on the sheets endpoint
    cors_origin: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls, env: Optional[Dict[str, str]] = None, *, dotenv_path: Optional[str] = None
    ) -> "SiteConfig":
        """Read configuration from ``env`` (defaults to ``os.environ`` after .env)."""
        if env is None:
            load_dotenv(dotenv_path or ".env")
            env = dict(os.environ)

        def _get(name: str) -> Optional[str]:
            val = env.get(name)
            if val is None:
                return None
            val = val.strip()
            return val or None

        return cls(
            notion_token=_get(ENV_NOTION_TOKEN),
            service_account_json=_get(ENV_SERVICE_ACCOUNT),
            sheet_id=_get(ENV_SHEET_ID),
            cors_origin=_get(ENV_CORS_ORIGIN),
            log_level=(_get(ENV_LOG_LEVEL) or "INFO").upper(),
        )

    def notion_token_or_raise(self) -> str:
        if not self.notion_token:
            raise ConfigurationError(f"Missing {ENV_NOTION_TOKEN}")
        return self.notion_token

    def sheet_id_or_raise(self) -> str:
        if not self.sheet_id:
            raise ConfigurationError(f"Missing {ENV_SHEET_ID}")
        return self.sheet_id

    def service_account_info_or_raise(self) -> Dict[str, Any]:
        """Parse the service-account JSON payload.

        The decode error is deliberately not chained: its message can quote
        fragments of the credential.
        """
        raw = self.service_account_json
        if not raw:
            raise ConfigurationError(f"Missing {ENV_SERVICE_ACCOUNT}")
        try:
            info = json.loads(raw)
        except ValueError:
            LOGGER.error("%s is not valid JSON", ENV_SERVICE_ACCOUNT)
            raise ConfigurationError(f"Malformed {ENV_SERVICE_ACCOUNT}") from None
        if not isinstance(info, dict):
            raise ConfigurationError(f"Malformed {ENV_SERVICE_ACCOUNT}")
        return info


def configure_logging(config: SiteConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
