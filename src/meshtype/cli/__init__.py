"""Command-line interface for meshtype.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font size, depth, placement and curve quality options
- STL/OBJ/PLY/OFF/GLB export
- Verbose/quiet output modes
- Detailed error reporting
"""

from meshtype.cli.app import cli, main

__all__ = ["cli", "main"]
