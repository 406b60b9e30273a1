"""APKG export for Anki decks."""

import hashlib
from pathlib import Path

import genanki

from vault2anki.exporters.errors import ExportError
from vault2anki.schemas.cards import Card
from vault2anki.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)

_CARD_CSS = """
.card {
    font-family: arial;
    font-size: 20px;
    text-align: center;
    color: black;
    background-color: white;
}
"""


@log_exceptions(logger)
def export_apkg(
    cards: list[Card],
    deck_name: str,
    output: str | Path,
) -> Path:
    """Export cards to APKG format (Anki deck package).

    Args:
        cards: Cards to export
        deck_name: Name for the Anki deck
        output: Output file path

    Returns:
        Path to the created APKG file

    Raises:
        ExportError: If the package cannot be written
    """
    logger.info(f"Exporting APKG: {deck_name} ({len(cards)} cards)")

    # Deterministic IDs keep re-imports updating the same deck
    deck = genanki.Deck(_generate_id(deck_name), deck_name)
    model = _create_basic_model(_generate_id(f"{deck_name}_model"), deck_name)

    for card in cards:
        deck.add_note(genanki.Note(model=model, fields=[card.front, card.back]))

    output_path = Path(output)
    try:
        genanki.Package(deck).write_to_file(str(output_path))
    except OSError as e:
        raise ExportError(f"Could not write {output_path}: {e}") from e

    logger.info(f"Created APKG at {output_path}")
    return output_path


def _create_basic_model(model_id: int, deck_name: str) -> genanki.Model:
    """Create a basic Anki model with Front/Back fields."""
    return genanki.Model(
        model_id,
        f"{deck_name} Model",
        fields=[
            {"name": "Front"},
            {"name": "Back"},
        ],
        templates=[
            {
                "name": "Card 1",
                "qfmt": "{{Front}}",
                "afmt": '{{FrontSide}}<hr id="answer">{{Back}}',
            },
        ],
        css=_CARD_CSS,
    )


def _generate_id(name: str) -> int:
    """Generate a deterministic 31-bit ID from a string."""
    hash_bytes = hashlib.md5(name.encode()).digest()
    return int.from_bytes(hash_bytes[:4], "big") & 0x7FFFFFFF
