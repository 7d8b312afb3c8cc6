from theme_purge_tools import purge, themes
import typer

app = typer.Typer(no_args_is_help=True)
app.add_typer(purge.app, name="purge")
app.add_typer(themes.app, name="themes")
