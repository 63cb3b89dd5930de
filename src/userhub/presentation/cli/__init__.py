"""Command-line interface for userhub."""

from userhub.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
