"""Render command for the careerpages CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from careerpages.cli.utils.services import get_notion_service
from careerpages.exceptions import InvalidDocumentReference
from careerpages.services.notion import NotionError

console = Console(stderr=True)


def main(
    url: str = typer.Argument(..., help="Notion page URL (or bare page id)"),
    page: bool = typer.Option(
        False, "--page", help="Wrap the fragment in a standalone HTML document"
    ),
    title: Optional[str] = typer.Option(
        None, "--title", help="Document title for --page (defaults to the page title)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
):
    """Render a Notion page to HTML."""
    service = get_notion_service()

    try:
        if page:
            html = service.render_document_page(url, title=title)
        else:
            html = service.render_document(url)
    except InvalidDocumentReference as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}: {escape(url)}")
        raise typer.Exit(2)
    except NotionError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(html)
        return
    output.write_text(html, encoding="utf-8")
    console.print(f"Wrote [bold]{len(html)}[/bold] characters to {escape(str(output))}")
