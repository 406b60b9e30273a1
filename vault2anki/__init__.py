"""vault2anki: Convert Markdown notes into Anki flashcards.

Every heading in a note starts a card. The heading text becomes the front and
the content up to the next heading becomes the back, with list items appended
as bullet lines and fenced code rendered with syntax highlighting.

    from vault2anki import parse_markdown

    cards = parse_markdown("# Capital of France\\nParis")
    # cards[0].front == "Capital of France", cards[0].back == "Paris"

Whole directories are converted with :func:`collect_cards` and written with
one of the exporters:

    import asyncio

    from vault2anki import collect_cards, export_tsv

    cards = asyncio.run(collect_cards("notes/"))
    export_tsv(cards, "anki_cards.csv")
"""

from vault2anki.collect import collect_cards, discover_notes
from vault2anki.exporters import ExportError, export_apkg, export_tsv
from vault2anki.parsing import CardParser, Event, EventKind, parse, parse_markdown
from vault2anki.rendering import CodeRenderer, get_code_renderer
from vault2anki.schemas.cards import Card

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "CardParser",
    "Event",
    "EventKind",
    "parse",
    "parse_markdown",
    # Rendering
    "CodeRenderer",
    "get_code_renderer",
    # Collection
    "collect_cards",
    "discover_notes",
    # Export
    "ExportError",
    "export_apkg",
    "export_tsv",
    # Schemas
    "Card",
]
