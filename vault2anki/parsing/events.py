"""Structural events produced by tokenizing a Markdown document."""

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    """Kinds of events in a flattened Markdown stream."""

    HEADING_START = "heading_start"
    HEADING_END = "heading_end"
    TEXT = "text"
    INLINE_CODE = "inline_code"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"
    LIST_START = "list_start"
    LIST_END = "list_end"
    ITEM_START = "item_start"
    ITEM_END = "item_end"
    BLOCK_QUOTE_START = "block_quote_start"
    BLOCK_QUOTE_END = "block_quote_end"
    CODE_BLOCK_START = "code_block_start"
    CODE_BLOCK_END = "code_block_end"
    LINK_END = "link_end"


@dataclass(frozen=True)
class Event:
    """A single event; only the payload fields relevant to ``kind`` are set."""

    kind: EventKind
    text: str = ""
    level: int = 0  # heading level, 1-6
    lang: str | None = None  # fenced code block language tag
    url: str = ""
    title: str = ""  # link title, currently unused downstream
