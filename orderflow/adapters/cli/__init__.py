"""Command-line interface adapters.

Provides CLI commands for driving orderflow:
- submit: Build an order from arguments and submit it
"""

from .commands import CLICommandHandler

__all__ = ["CLICommandHandler"]
