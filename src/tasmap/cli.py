"""
Command-line interface for the tasmap service.

Provides the ``serve`` command for the web service and two offline commands
that run the same classification and rendering path on a coordinates file.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config.settings import load_settings
from .core.cache import RenderCache
from .core.domain import CoordinateFormat, CoordinateInput, MapType
from .core.generator import MapGenerator
from .errors import TasmapError
from .utils.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="tasmap")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML settings file",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str]):
    """Tasmap - distribution maps from coordinate lists."""
    try:
        settings = load_settings(config_file)
    except TasmapError as exc:
        raise click.ClickException(exc.message) from exc

    configure_logging("tasmap", log_level=settings.log_level, log_format=settings.log_format)
    ctx.obj = settings


@cli.command()
@click.option("--host", help="Host to bind to")
@click.option("--port", type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_obj
def serve(settings, host: Optional[str], port: Optional[int], reload: bool):
    """Start the web service."""
    import uvicorn

    from .api import create_app

    serve_host = host or settings.host
    serve_port = port or settings.port

    if reload:
        uvicorn.run(
            "tasmap.api:create_app",
            host=serve_host,
            port=serve_port,
            reload=True,
            factory=True,
            access_log=False,
        )
    else:
        uvicorn.run(create_app(settings), host=serve_host, port=serve_port, access_log=False)


@cli.command()
@click.argument("coordinates_file", type=click.File("r"))
@click.pass_obj
def classify(settings, coordinates_file):
    """Report the record format of COORDINATES_FILE.

    Exits with status 1 when the coordinates cannot be interpreted.
    """
    coordinate_input = CoordinateInput.from_form("", "", coordinates_file.read())
    generator = MapGenerator.from_settings(settings, RenderCache())
    coordinate_format = generator.classify(coordinate_input)
    click.echo(coordinate_format.value)
    if coordinate_format is CoordinateFormat.INVALID:
        sys.exit(1)


@cli.command()
@click.argument("coordinates_file", type=click.File("r"))
@click.option("--taxon", "-t", required=True, help="Taxon name shown on the map")
@click.option(
    "--map-type",
    "-m",
    type=click.Choice([t.value for t in MapType]),
    default=MapType.GRID.value,
    show_default=True,
    help="Map style",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file (defaults to the derived map file name)",
)
@click.pass_obj
def render(settings, coordinates_file, taxon: str, map_type: str, output: Optional[str]):
    """Draw a map from COORDINATES_FILE and write it as SVG."""
    coordinate_input = CoordinateInput.from_form(taxon, map_type, coordinates_file.read())
    generator = MapGenerator.from_settings(settings, RenderCache())

    try:
        rendered = generator.generate(coordinate_input)
    except TasmapError as exc:
        raise click.ClickException(exc.message) from exc

    target = Path(output or rendered.file_name)
    target.write_text(rendered.svg_body, encoding="utf-8")
    click.echo(f"Wrote {target}")


if __name__ == "__main__":
    cli()
