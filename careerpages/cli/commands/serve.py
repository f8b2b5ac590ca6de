"""Serve command for the careerpages CLI."""

import typer

from careerpages.cli.utils.services import get_config
from careerpages.web import create_app


def main(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(5000, "--port", "-p", help="Port to listen on"),
    debug: bool = typer.Option(False, "--debug", help="Enable the Flask debugger"),
):
    """Run the API endpoints locally (development server)."""
    app = create_app(get_config())
    app.run(host=host, port=port, debug=debug)
