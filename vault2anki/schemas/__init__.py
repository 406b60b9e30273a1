"""Data schemas shared by the parser, collector and exporters."""

from vault2anki.schemas.cards import Card

__all__ = ["Card"]
