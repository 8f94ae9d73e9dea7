import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...domain.entities.severity import Severity

console = Console()


@click.command()
def list_severities_command() -> None:
    table = Table(title="Severities")
    table.add_column("Event", style="bold")
    table.add_column("Tag")
    table.add_column("Color")
    table.add_column("Stream")
    for severity in Severity:
        table.add_row(
            severity.value,
            escape(severity.tag),
            f"[{severity.color}]{severity.color}[/{severity.color}]",
            "stderr" if severity.stderr else "stdout",
        )
    console.print(table)
