"""Collect cards from every note below a directory.

Each note is read and parsed by its own task. Reads run in worker threads so
they do not block the event loop; parsing is synchronous and shares nothing
between notes. Results are concatenated in discovery order so the output does
not depend on task scheduling.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable
from pathlib import Path

from vault2anki.config import Settings
from vault2anki.config import settings as default_settings
from vault2anki.parsing.engine import parse_markdown
from vault2anki.rendering.code import CodeRenderer, get_code_renderer
from vault2anki.schemas.cards import Card
from vault2anki.utils.logging import get_logger

logger = get_logger(__name__)


def _matches(name: str, extensions: tuple[str, ...]) -> bool:
    return name.endswith(extensions)


def discover_notes(root: str | Path, extensions: Iterable[str]) -> list[Path]:
    """List Markdown notes below a directory.

    Directories and files are visited in sorted order. Entries that cannot be
    read (permission errors and the like) are skipped without notice, and
    symlinked directories are not followed.

    Args:
        root: Directory to search, or a single note
        extensions: Allowed file suffixes, matched case-sensitively

    Returns:
        Paths of matching notes
    """
    root = Path(root)
    suffixes = tuple(extensions)

    if root.is_file():
        return [root] if _matches(root.name, suffixes) else []

    notes: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            if _matches(filename, suffixes):
                notes.append(Path(dirpath) / filename)
    return notes


async def load_note_cards(
    path: Path,
    renderer: CodeRenderer,
    semaphore: asyncio.Semaphore,
) -> list[Card]:
    """Read one note and parse it into cards.

    Args:
        path: Note to read
        renderer: Shared code renderer
        semaphore: Bounds the number of concurrent reads

    Returns:
        Cards for the note, or an empty list if it could not be read
    """
    async with semaphore:
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.info(f"Skipping {path}: {e}")
            return []

    cards = parse_markdown(content, renderer)
    logger.debug(f"Parsed {len(cards)} cards from {path}")
    return cards


async def collect_cards(
    root: str | Path,
    settings: Settings | None = None,
) -> list[Card]:
    """Parse every note below ``root`` concurrently.

    Args:
        root: Directory (or single note) to convert
        settings: Configuration, defaults to the environment settings

    Returns:
        All cards, grouped by note in discovery order
    """
    settings = settings or default_settings
    notes = discover_notes(root, settings.markdown_extensions)
    logger.info(f"Found {len(notes)} notes under {root}")

    renderer = get_code_renderer(settings.highlight_style)
    semaphore = asyncio.Semaphore(max(1, settings.max_concurrent_reads))

    tasks = [load_note_cards(path, renderer, semaphore) for path in notes]
    results = await asyncio.gather(*tasks)

    cards = [card for note_cards in results for card in note_cards]
    logger.info(f"Collected {len(cards)} cards from {len(notes)} notes")
    return cards
