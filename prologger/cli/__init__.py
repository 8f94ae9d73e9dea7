import click

from .commands.emit import emit_command
from .commands.severities import list_severities_command


@click.group()
def app() -> None:
    pass


app.add_command(emit_command, name="emit")
app.add_command(list_severities_command, name="severities")
__all__ = ["app"]
