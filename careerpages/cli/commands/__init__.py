"""Command modules for the careerpages CLI."""

from careerpages.cli.commands import render, serve, sheets

__all__ = ["render", "serve", "sheets"]
