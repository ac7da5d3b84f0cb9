import pathlib
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from datagen.core.builder import TableBuilder
from datagen.core.random import Randomizer
from datagen.core.settings import ConfigError, Settings
from datagen.core.table import TableSpec
from datagen.sinks.definitions import SinkFactory

# stdout carries the generated data; everything else goes to stderr
console = Console(stderr=True)


def print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_columns(table: TableSpec) -> None:
    grid = Table(title="Columnas")
    grid.add_column("#", justify="right", style="dim")
    grid.add_column("Name", style="cyan")
    grid.add_column("Type")
    grid.add_column("Generator", style="green")

    for idx, column in enumerate(table.columns):
        gen = column.generator.describe() if column.generator is not None else "-"
        grid.add_row(str(idx), escape(column.name), escape(column.type_label), gen)

    console.print(grid)


@click.command()
@click.argument("config", type=click.Path(dir_okay=False))
@click.option("--rows", type=int, help="Override number of rows")
@click.option("--seed", type=int, help="Seed for random-text columns (reproducible output)")
@click.option("--format", "output_format", default="text",
              type=click.Choice(["text", "parquet"]), help="Output format")
@click.option("--output", "-o", type=click.Path(dir_okay=False),
              help="Write to this file instead of stdout")
@click.option("--describe", is_flag=True, help="Print the table layout and exit")
@click.option("--force", is_flag=True, help="Skip disk space check")
def main(config, rows, seed, output_format, output, describe, force):
    """Datagen: synthetic delimited data from a table schema (CONFIG)."""

    # 1. Load and build; config problems stop here, before any output
    settings = Settings()
    try:
        full_config = settings.load(config)
        randomizer = Randomizer(seed) if seed is not None else None
        builder = TableBuilder(full_config, randomizer)
        row_count = rows if rows is not None else builder.row_count()
        # Nothing to write: the columns are never built
        if row_count <= 0 and not describe:
            return
        table = builder.build()
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    if describe:
        console.print(escape(table.describe()), end="")
        print_columns(table)
        return

    # 2. Sink
    destination = pathlib.Path(output) if output else None
    try:
        sink = SinkFactory.get_sink(
            output_format, destination, validate_disk_space=not force)
        written = sink.write(table, row_count)
    except (ValueError, OSError) as e:
        print_error(str(e))
        sys.exit(1)

    # 3. Resumen (solo para archivos, stdout lleva los datos)
    if destination is not None and written > 0:
        console.print(Panel(
            f"✅ {written:,} rows x {len(table)} columns\nRuta: {destination}",
            style="bold green"
        ))


if __name__ == "__main__":
    main()
