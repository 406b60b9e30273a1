"""TSV export for Anki import."""

import csv
from io import StringIO
from pathlib import Path

from vault2anki.exporters.errors import ExportError
from vault2anki.schemas.cards import Card
from vault2anki.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)


@log_exceptions(logger)
def export_tsv(
    cards: list[Card],
    output: str | Path | None = None,
) -> str:
    """Export cards as tab separated rows of front and back.

    Every field is quoted and no header row is written, which is what Anki's
    text importer expects.

    Args:
        cards: Cards to export
        output: Optional output path (if None, returns string)

    Returns:
        TSV content as string

    Raises:
        ExportError: If the output file cannot be written
    """
    buffer = StringIO()
    writer = csv.writer(buffer, delimiter="\t", quoting=csv.QUOTE_NONNUMERIC)

    for card in cards:
        writer.writerow([card.front, card.back])

    content = buffer.getvalue()

    if output:
        path = Path(output)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e
        logger.info(f"Wrote {len(cards)} cards to {path}")

    return content
