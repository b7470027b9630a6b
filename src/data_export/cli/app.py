from __future__ import annotations

import typer

from data_export.cli.commands.export import export_command
from data_export.cli.commands.names import names_command

app = typer.Typer(
    name="data-export",
    help="Segmented batch export of JSON records to files",
    add_completion=False,
)

app.command("export")(export_command)
app.command("names")(names_command)


def main():
    app()


if __name__ == "__main__":
    main()
