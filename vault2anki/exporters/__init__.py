"""Export formats for flashcards."""

from vault2anki.exporters.apkg import export_apkg
from vault2anki.exporters.errors import ExportError
from vault2anki.exporters.tsv import export_tsv

__all__ = ["ExportError", "export_tsv", "export_apkg"]
