"""Public API for the spreadsheet reader."""

from .client import SheetsApiError, SheetsClient, SheetsError, a1_range
from .models import HomeContent, Job, Section, SiteContent
from .service import SheetsService, filter_active_rows

__all__ = [
    "SheetsService",
    "SheetsClient",
    "SheetsError",
    "SheetsApiError",
    "SiteContent",
    "HomeContent",
    "Job",
    "Section",
    "a1_range",
    "filter_active_rows",
]
