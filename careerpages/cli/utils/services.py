"""Service construction helpers shared by the CLI commands."""

import typer
from rich.console import Console
from rich.markup import escape

from careerpages.config import SiteConfig, configure_logging
from careerpages.exceptions import ConfigurationError
from careerpages.services.notion import NotionService
from careerpages.services.sheets import SheetsService

console = Console(stderr=True)

_config = None


def get_config() -> SiteConfig:
    """Load configuration once per process (environment + .env)."""
    global _config
    if _config is None:
        _config = SiteConfig.from_env()
        configure_logging(_config)
    return _config


def get_notion_service() -> NotionService:
    try:
        return NotionService.from_config(get_config())
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def get_sheets_service() -> SheetsService:
    try:
        return SheetsService.from_config(get_config())
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
