"""Command line interface for auth0kit."""

from .main import cli, main

__all__ = ["cli", "main"]
