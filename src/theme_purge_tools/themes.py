"""Theme tools."""
from pathlib import Path

import typer
from rich.console import Console

from theme_purge_tools.errors import DiscoveryError
from theme_purge_tools.utils.themes import THEME_MARKER, discover_themes

app = typer.Typer(no_args_is_help=True)
err = Console(stderr=True)


@app.command(name="list")
def list_themes(root: Path = typer.Argument(Path("."))):
    """List directories containing a theme.css."""
    try:
        themes = discover_themes(root)
    except DiscoveryError as e:
        err.print(f"❌  {e}", markup=False)
        raise SystemExit(1)

    if not themes:
        err.print(f"No {THEME_MARKER} found under {str(root)!r}", markup=False)
        raise SystemExit(1)

    for theme in themes:
        typer.echo(theme)
