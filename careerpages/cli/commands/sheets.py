"""Sheets command for the careerpages CLI."""

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from careerpages.cli.utils.services import get_sheets_service
from careerpages.services.sheets import SheetsError

console = Console()


def main(
    as_json: bool = typer.Option(
        False, "--json", help="Print the endpoint's JSON payload instead of tables"
    ),
):
    """Show the site content read from the spreadsheet."""
    service = get_sheets_service()

    try:
        content = service.read_site_content()
    except SheetsError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(content.to_json_dict(), indent=2, ensure_ascii=False))
        return

    console.print(f"[bold]{escape(content.home.title) or '(no title)'}[/bold]")
    for intro in (content.home.intro1, content.home.intro2):
        if intro:
            console.print(escape(intro))

    if not content.jobs:
        console.print("No jobs found")
        return

    table = Table("Job", "Section", "Notion URL")
    for job in content.jobs:
        sections = content.sections_by_job.get(job.name, [])
        table.add_row(
            f"[bold]{escape(job.name)}[/bold]", "(blurb)", escape(job.notion_blurb)
        )
        if not sections:
            table.add_row("", "[yellow]No sections yet[/yellow]", "")
        for section in sections:
            table.add_row("", escape(section.title), escape(section.notion_url))
    console.print(table)
