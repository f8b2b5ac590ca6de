#!/usr/bin/env python
"""Command line interface for careerpages."""

import typer

from careerpages.cli.commands import render, serve, sheets

app = typer.Typer(help="Careers site content tools (Google Sheets + Notion)")

app.command("render")(render.main)
app.command("sheets")(sheets.main)
app.command("serve")(serve.main)


@app.callback()
def callback():
    """Read site content and render Notion pages from the command line."""
    pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
