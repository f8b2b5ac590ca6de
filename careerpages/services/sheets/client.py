"""
Low-level Google Sheets values client.

Reads A1 ranges through the Sheets v4 REST API using a google-auth
AuthorizedSession (a requests.Session that attaches and refreshes the
service-account bearer token). Read-only scopes only.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2 import service_account

from careerpages.exceptions import CareerPagesError, ConfigurationError

LOGGER = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"
SCOPES = (
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
)


# ------------------------------- Errors --------------------------------------


class SheetsError(CareerPagesError):
    """Base Sheets transport error."""


class SheetsApiError(SheetsError):
    """Catch-all API error (HTTP >= 400, auth refresh, invalid JSON)."""

    def __init__(
        self,
        message: str,
        payload: Optional[object] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code


# ------------------------------- Helpers -------------------------------------


def a1_range(sheet_name: str, cells: str) -> str:
    """Quote a tab name for A1 notation: 'Bob''s Jobs'!A2:C."""
    return "'" + sheet_name.replace("'", "''") + "'!" + cells


# ------------------------------ Raw client -----------------------------------


class SheetsClient:
    """
    Raw values reader for one spreadsheet. Maps to:
      - GET /v4/spreadsheets/{spreadsheetId}/values/{range}
    """

    def __init__(
        self,
        spreadsheet_id: str,
        session: requests.Session,
        *,
        base_url: str = SHEETS_API_URL,
    ):
        self.spreadsheet_id = spreadsheet_id
        self._session = session
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_service_account_info(
        cls, info: Dict[str, Any], spreadsheet_id: str
    ) -> "SheetsClient":
        try:
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=list(SCOPES)
            )
        except ValueError:
            # google-auth messages may quote the payload; report the variable only
            raise ConfigurationError(
                "Malformed GOOGLE_SERVICE_ACCOUNT_JSON"
            ) from None
        return cls(spreadsheet_id, AuthorizedSession(credentials))

    def get_values(self, range_a1: str) -> List[List[str]]:
        """Return the rows of ``range_a1``; trailing empty cells are omitted by the API."""
        url = (
            f"{self._base_url}/{quote(self.spreadsheet_id, safe='')}"
            f"/values/{quote(range_a1, safe='')}"
        )
        LOGGER.info("GET values %s", range_a1)
        try:
            resp = self._session.get(url, params={"majorDimension": "ROWS"})
        except (requests.RequestException, GoogleAuthError) as e:
            LOGGER.error("GET values %s failed: %s", range_a1, type(e).__name__)
            raise SheetsApiError(f"Sheets request failed: {type(e).__name__}") from e
        code = getattr(resp, "status_code", 0)
        if code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = getattr(resp, "text", None)
            message = f"HTTP {code}"
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                message = str(body["error"].get("message") or message)
            LOGGER.error("GET values %s failed with code %d", range_a1, code)
            raise SheetsApiError(message, payload=body, status_code=code)
        try:
            data = resp.json()
        except ValueError:
            LOGGER.error("Failed to parse JSON response for %s", range_a1)
            raise SheetsApiError("Invalid JSON response", status_code=code)
        rows = (data.get("values") if isinstance(data, dict) else None) or []
        LOGGER.debug("Range %s returned %d rows", range_a1, len(rows))
        return [["" if c is None else str(c) for c in row] for row in rows]
