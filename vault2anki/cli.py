"""Command line entry point."""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from vault2anki.collect import collect_cards
from vault2anki.config import settings
from vault2anki.exporters import ExportError, export_apkg, export_tsv

app = typer.Typer(
    name="vault2anki",
    help="Convert a tree of Markdown notes into Anki flashcards.",
    add_completion=False,
)


class ExportFormat(str, Enum):
    """Supported output formats."""

    TSV = "tsv"
    APKG = "apkg"


def _default_output(fmt: ExportFormat) -> Path:
    path = Path(settings.output_path)
    if fmt is ExportFormat.APKG:
        return path.with_suffix(".apkg")
    return path


@app.command()
def convert(
    target: Path = typer.Option(
        ...,
        "--target",
        "-t",
        exists=True,
        help="Directory of Markdown notes (or a single note) to convert.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (defaults to anki_cards.csv, or .apkg for --format apkg).",
    ),
    fmt: ExportFormat = typer.Option(
        ExportFormat.TSV,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format.",
    ),
    deck_name: str = typer.Option(
        "Vault",
        "--deck-name",
        help="Deck name used for apkg output.",
    ),
) -> None:
    """Convert every note under TARGET into flashcards."""
    output = output or _default_output(fmt)

    cards = asyncio.run(collect_cards(target, settings))

    try:
        if fmt is ExportFormat.APKG:
            export_apkg(cards, deck_name, output)
        else:
            export_tsv(cards, output)
    except ExportError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote {len(cards)} cards to {output}")


def run() -> None:
    """Console script entry point."""
    app()
