"""Command-line interface for artifind."""

import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import ScannerSettings
from .errors import ArtifindError
from .location import Location
from .scanner import Scanner
from .utils import load_class


def _build_scanner(ctx: click.Context) -> Scanner:
    return Scanner(settings=ctx.obj["settings"])


@click.group()
@click.option("--path", "extra_paths", multiple=True, type=click.Path(file_okay=False), help="Prepend to sys.path")
@click.pass_context
def main(ctx: click.Context, extra_paths: tuple[str, ...]):
    """Artifind - find resources and classes in packages and directories."""
    load_dotenv(Path.cwd() / ".env")
    for entry in reversed(extra_paths):
        sys.path.insert(0, str(Path(entry).resolve()))
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console()
    ctx.obj["settings"] = ScannerSettings()


@main.command()
@click.argument("location")
@click.option("--prefix", default="", help="Required start of resource filenames")
@click.option("--suffix", default="", help="Required end of resource filenames")
@click.option("--show", is_flag=True, help="Print the content of each resource")
@click.pass_context
def resources(ctx: click.Context, location: str, prefix: str, suffix: str, show: bool):
    """List resources under LOCATION."""
    console: Console = ctx.obj["console"]
    try:
        found = _build_scanner(ctx).scan_for_resources(Location(location), prefix, suffix)
    except ArtifindError as exc:
        cause = f": {exc.__cause__}" if exc.__cause__ else ""
        console.print(f"[red]Error:[/red] {exc}{cause}")
        ctx.exit(1)

    table = Table(title=f"Resources in {location}")
    table.add_column("Resource", style="cyan")
    table.add_column("On disk", style="dim")
    for resource in found:
        table.add_row(resource.location, resource.location_on_disk or "-")
    console.print(table)
    if show:
        encoding = ctx.obj["settings"].encoding
        for resource in found:
            console.rule(resource.location)
            console.print(resource.read_text(encoding), markup=False, highlight=False)
    console.print(f"[green]{len(found)} resource(s) found")


@main.command()
@click.argument("location")
@click.argument("interface")
@click.pass_context
def classes(ctx: click.Context, location: str, interface: str):
    """List concrete classes under LOCATION implementing INTERFACE (module:Name)."""
    console: Console = ctx.obj["console"]
    try:
        implemented_interface = load_class(interface)
        found = _build_scanner(ctx).scan_for_classes(Location(location), implemented_interface)
    except Exception as exc:
        # Class scans do not wrap errors raised while importing scanned modules.
        console.print(f"[red]Error:[/red] {exc}")
        ctx.exit(1)

    for cls in found:
        console.print(f"{cls.__module__}.{cls.__qualname__}")
    console.print(f"[green]{len(found)} class(es) found")


if __name__ == "__main__":
    main()
