"""CLI application entry point for meshtype.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from meshtype import __version__
from meshtype.cli.output import (
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_success,
    print_text_info,
)
from meshtype.config import (
    ExportConfig,
    ExtrusionConfig,
    LoggingConfig,
    MeshFormat,
    MeshTypeSettings,
    OutlineConfig,
)
from meshtype.core import TextMesher
from meshtype.exceptions import MeshExportError, MeshTypeError
from meshtype.io import MeshWriter
from meshtype.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="meshtype",
    help="Turn a line of text into an extruded 3D mesh.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"meshtype v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Argument(
            help="Text to mesh",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {font}-{text}.{format} next to the font)",
        ),
    ] = None,
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Nominal font size in points (rendered at 96 dpi)",
            min=1,
            max=4096,
        ),
    ] = 48,
    depth: Annotated[
        float,
        typer.Option(
            "--depth",
            "-d",
            help="Extrusion depth (must be positive)",
        ),
    ] = 10.0,
    x: Annotated[
        float,
        typer.Option("--x", "-x", help="Pen x of the first character"),
    ] = 0.0,
    y: Annotated[
        float,
        typer.Option("--y", "-y", help="Baseline y"),
    ] = 0.0,
    bezier_steps: Annotated[
        int,
        typer.Option(
            "--bezier-steps",
            help="Straight segments per curve segment",
            min=1,
            max=64,
        ),
    ] = 4,
    file_type: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (stl|obj|ply|off|glb); default from the output suffix",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate an extruded 3D mesh of TEXT set in FONT.

    Example:
        meshtype Roboto-Regular.ttf "Hello" --depth 5

    This will create Roboto-Regular-Hello.stl next to the font.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if depth <= 0:
        print_error(f"Invalid depth: {depth}", details="The extrusion depth must be positive.")
        raise typer.Exit(code=1)

    if not font.exists():
        print_error(
            f"Font file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font.is_file():
        print_error(
            f"Font path is not a file: {font}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    if file_type is not None:
        try:
            mesh_format = MeshFormat(file_type.lower())
        except ValueError:
            print_error(
                f"Invalid format: {file_type}",
                details="Valid values: " + ", ".join(f.value for f in MeshFormat),
            )
            raise typer.Exit(code=1)
    elif output is not None and output.suffix:
        try:
            mesh_format = MeshWriter.resolve_format(output)
        except MeshExportError as e:
            print_error(e.reason)
            raise typer.Exit(code=1)
    else:
        mesh_format = MeshFormat.STL

    settings = MeshTypeSettings(
        outline=OutlineConfig(font_height=size, bezier_steps=bezier_steps),
        extrusion=ExtrusionConfig(depth=depth, origin_x=x, origin_y=y),
        export=ExportConfig(file_type=mesh_format),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    output_path = output or MeshWriter.default_output_path(font, text, mesh_format)

    try:
        if not quiet:
            print_step("Loading font")

        mesher = TextMesher.from_settings(font, settings)
        if not mesher.ready:
            print_error(f"Could not load font: {font}", details="See the log for details.")
            raise typer.Exit(code=1)

        if not quiet:
            print_font_info(str(font), size, bezier_steps)
            print_step("Generating mesh")
            print_text_info(text, depth, x, y)

        started = time.perf_counter()
        with mesher:
            mesh = mesher.generate(
                text,
                x=settings.extrusion.origin_x,
                y=settings.extrusion.origin_y,
                extrude=settings.extrusion.depth,
            )
            stats = mesher.last_stats

        if mesh is None:
            print_error(
                "No geometry generated",
                details="The text produced no glyph outlines with this font.",
            )
            raise typer.Exit(code=1)

        if not quiet:
            print_step("Writing mesh")

        MeshWriter.write(mesh, output_path, settings.export.file_type)
        elapsed = time.perf_counter() - started

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=elapsed,
                characters=stats.characters,
                contours=stats.contours,
                triangles=mesh.triangle_count,
                vertices=mesh.vertex_count,
                skipped=stats.glyphs_skipped,
            )

    except MeshExportError as e:
        print_error(f"Could not write mesh: {e.reason}")
        raise typer.Exit(code=1)
    except MeshTypeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
