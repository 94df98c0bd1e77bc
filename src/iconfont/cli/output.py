"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
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
    console.print(f"\n[bold]Iconfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_config_info(config_path: str, font_name: str, types: Sequence[str]) -> None:
    """Print configuration summary.

    Args:
        config_path: Path to the configuration file
        font_name: Font family name
        types: Requested font formats
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(config_path)
    console.print(line)
    console.print(f"  {escape(font_name)} {SYM_DOT} {', '.join(types)}")


def print_files(files: Sequence[str], verbose: bool) -> None:
    """Print resolved icon files.

    Args:
        files: Resolved icon paths
        verbose: Whether to list every file
    """
    console.print(f"  [green]{len(files)}[/green] icons")
    if verbose:
        for path in files[:20]:
            console.print(Text(f"  {path}"))
        if len(files) > 20:
            console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(files) - 20} more)")


def print_dependencies(
    files: Sequence[str],
    file_deps: Sequence[str],
    directory_deps: Sequence[str],
) -> None:
    """Print resolved files and dependency edges as a table."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("kind")
    table.add_column("path", overflow="fold")

    for path in files:
        table.add_row("icon", Text(path))
    for path in file_deps:
        table.add_row("file dep", Text(path))
    for path in directory_deps:
        table.add_row("dir dep", Text(path))

    console.print(table)


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
    output_dir: str,
    stylesheet: str,
    written: Sequence[str],
    total_time_s: float,
    glyphs: int,
    inline: int,
) -> None:
    """Print success message with summary.

    Args:
        output_dir: Output directory
        stylesheet: Stylesheet file name
        written: Names of written artifacts
        total_time_s: Total build time in seconds
        glyphs: Number of glyphs in the font
        inline: Number of formats embedded as data URIs
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_dir, style="bold")
    console.print(line)

    console.print(
        f"  {glyphs} glyphs {SYM_DOT} {len(written)} files {SYM_DOT} {inline} embedded"
    )
    console.print(Text(f"  {stylesheet}"))
    for name in written:
        console.print(Text(f"  {name}"))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
