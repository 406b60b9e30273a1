"""Markdown tokenization and card segmentation."""

from vault2anki.parsing.engine import CardParser, Destination, parse, parse_markdown
from vault2anki.parsing.events import Event, EventKind
from vault2anki.parsing.tokenizer import tokenize

__all__ = [
    "CardParser",
    "Destination",
    "Event",
    "EventKind",
    "parse",
    "parse_markdown",
    "tokenize",
]
