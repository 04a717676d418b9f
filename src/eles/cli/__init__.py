"""CLI layer for eles.

This module provides the command-line interface for eles,
built on Typer with Rich error output.

Usage:
    eles -la
    eles -lR src tests
"""

from eles.cli.app import app, main, run
from eles.cli.context import create_context

__all__ = [
    # App
    "app",
    "main",
    "run",
    # Context
    "create_context",
]
