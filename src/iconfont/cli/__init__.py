"""Command-line interface for iconfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Build fonts and stylesheet into an output directory
- Inspect resolved files and dependency edges
- Verbose/quiet output modes
- Detailed error reporting
"""

from iconfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
