"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
"""


from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]meshtype[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_height: int, bezier_steps: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_height: Nominal size in points
        bezier_steps: Segments per curve
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    console.print(f"  {font_height} pt @ 96 dpi {SYM_DOT} {bezier_steps} steps per curve")


def print_text_info(text: str, depth: float, x: float, y: float) -> None:
    """Print what is being meshed."""
    line = Text("  ")
    line.append(repr(text))
    line.append(f" ({len(text)} characters)")
    console.print(line)
    console.print(f"  depth {depth:g} {SYM_DOT} origin ({x:g}, {y:g})")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    characters: int,
    contours: int,
    triangles: int,
    vertices: int,
    skipped: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total generation time in seconds
        characters: Number of characters laid out
        contours: Number of contours extruded
        triangles: Number of triangles in the mesh
        vertices: Number of vertices in the mesh
        skipped: Number of characters whose glyph was skipped
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {characters} characters {SYM_DOT} {contours} contours {SYM_DOT} "
        f"{triangles:,} triangles {SYM_DOT} {vertices:,} vertices"
    )

    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(f"  [{skipped_style}]{skipped} glyphs skipped[/{skipped_style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
