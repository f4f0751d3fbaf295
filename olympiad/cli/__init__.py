"""Command-line interface."""
from olympiad.cli.main import app, main

__all__ = ["app", "main"]
