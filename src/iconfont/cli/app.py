"""CLI application entry point for iconfont.

This module provides the main CLI interface using Typer.
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from iconfont import __version__
from iconfont.cli.output import (
    console,
    print_config_info,
    print_dependencies,
    print_error,
    print_files,
    print_header,
    print_step,
    print_success,
)
from iconfont.config import InvocationParams, LoggingConfig, load_config
from iconfont.core import (
    build_from_file,
    interpolate_name,
    resolve_files,
    select_formats,
    substitute_placeholders,
)
from iconfont.domain import BuildGraph
from iconfont.exceptions import ArtifactWriteError, ConfigLoadError, IconFontError
from iconfont.io import ArtifactWriter
from iconfont.utils import configure_logging

DEFAULT_CSS_NAME = "[fontname].css"

# Create the Typer app
app = typer.Typer(
    name="iconfont",
    help="Build icon fonts and stylesheets from SVG files.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Iconfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Build icon fonts and stylesheets from SVG files."""


@app.command()
def build(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Icon set configuration (JSON, YAML or Python)",
            show_default=False,
        ),
    ],
    out: Annotated[
        Path,
        typer.Option(
            "--out",
            "-o",
            help="Output directory",
        ),
    ] = Path("dist"),
    types: Annotated[
        list[str] | None,
        typer.Option(
            "--types",
            "-t",
            help="Font format to build (eot|woff|ttf|svg), repeatable",
        ),
    ] = None,
    embed: Annotated[
        bool,
        typer.Option(
            "--embed",
            help="Embed fonts in the stylesheet as data URIs",
        ),
    ] = False,
    html: Annotated[
        bool,
        typer.Option(
            "--html",
            help="Also emit the HTML preview (needs htmlFileName in the config)",
        ),
    ] = False,
    file_name: Annotated[
        str | None,
        typer.Option(
            "--file-name",
            help="Font file name template (default: [hash]-[fontname].[ext])",
        ),
    ] = None,
    css_name: Annotated[
        str,
        typer.Option(
            "--css-name",
            help="Stylesheet file name template",
        ),
    ] = DEFAULT_CSS_NAME,
    public_path: Annotated[
        str,
        typer.Option(
            "--public-path",
            help="URL prefix of emitted files in the stylesheet",
        ),
    ] = "/",
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
) -> None:
    """Build the icon font described by a configuration file.

    Icons are resolved relative to the configuration file. Font files and the
    stylesheet are written into the output directory.

    Example:
        iconfont build icons.font.json --out dist --types woff --types ttf
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not config_path.is_file():
        print_error(
            f"Config file not found: {config_path}",
            details=f"The file '{config_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        params = InvocationParams(
            types=types or None,
            embed=embed,
            html=html,
            file_name=file_name,
        )
    except ValidationError as e:
        print_error("Invalid option", details=str(e))
        raise typer.Exit(code=1)

    logging_config = LoggingConfig(
        log_file=log_file,
        log_level=log_level if not quiet else "ERROR",
    )
    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Building")

        graph = BuildGraph()
        result = asyncio.run(
            build_from_file(config_path, graph, params=params, public_path=public_path)
        )

        if not quiet:
            print_config_info(
                config_path=str(config_path),
                font_name=result.request.font_name,
                types=[fmt.value for fmt in result.request.types],
            )
            print_files(list(result.files.files), verbose=verbose)
            print_step("Writing")

        writer = ArtifactWriter(out)
        writer.write_all(graph.emitted)

        stylesheet = interpolate_name(
            substitute_placeholders(css_name, result.request.font_name, "css"),
            result.styles,
            resource_path=config_path.resolve(),
            context=config_path.resolve().parent,
        )
        writer.write(stylesheet, result.styles)

        if not quiet:
            print_success(
                output_dir=str(out),
                stylesheet=stylesheet,
                written=list(graph.emitted),
                total_time_s=result.stats.duration_seconds,
                glyphs=len(result.glyph_names),
                inline=result.stats.inline_count,
            )

    except ConfigLoadError as e:
        print_error(f"Could not load config: {e.reason}")
        raise typer.Exit(code=1)
    except ArtifactWriteError as e:
        print_error(f"Could not write artifact: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except IconFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except FileNotFoundError as e:
        print_error(f"Icon file not found: {e.filename}")
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def deps(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Icon set configuration (JSON, YAML or Python)",
            show_default=False,
        ),
    ],
) -> None:
    """Show resolved icon files and the dependency edges of a configuration."""
    try:
        config = load_config(config_path)
    except IconFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    resolved = resolve_files(config.files, config_path.resolve().parent)

    formats = ", ".join(fmt.value for fmt in select_formats(config))
    console.print(f"\n[bold]{escape(config.font_name)}[/bold] {formats}\n")
    print_dependencies(
        resolved.files,
        resolved.file_dependencies,
        resolved.directory_dependencies,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
