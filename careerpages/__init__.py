"""Read-only content layer for the careers site (Google Sheets + Notion)."""

from careerpages.config import SiteConfig
from careerpages.exceptions import (
    CareerPagesError,
    ConfigurationError,
    InvalidDocumentReference,
)

__version__ = "0.1.0"

__all__ = [
    "SiteConfig",
    "CareerPagesError",
    "ConfigurationError",
    "InvalidDocumentReference",
]
