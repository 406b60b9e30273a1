"""Markdown event source built on markdown-it-py.

markdown-it produces a flat list of block tokens whose ``inline`` tokens carry
their own children. This module walks both levels in document order and emits
the small set of :class:`Event` kinds the card parser understands. Everything
else (paragraph boundaries, emphasis, images, raw HTML, rules) is dropped.
"""

from __future__ import annotations

from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token

from vault2anki.parsing.events import Event, EventKind

_BLOCK_EVENTS: dict[str, EventKind] = {
    "heading_close": EventKind.HEADING_END,
    "bullet_list_open": EventKind.LIST_START,
    "bullet_list_close": EventKind.LIST_END,
    "ordered_list_open": EventKind.LIST_START,
    "ordered_list_close": EventKind.LIST_END,
    "list_item_open": EventKind.ITEM_START,
    "list_item_close": EventKind.ITEM_END,
    "blockquote_open": EventKind.BLOCK_QUOTE_START,
    "blockquote_close": EventKind.BLOCK_QUOTE_END,
}

_INLINE_EVENTS: dict[str, EventKind] = {
    "softbreak": EventKind.SOFT_BREAK,
    "hardbreak": EventKind.HARD_BREAK,
}


@lru_cache(maxsize=1)
def _get_markdown() -> MarkdownIt:
    """Return the shared CommonMark parser."""
    return MarkdownIt("commonmark")


def _code_block_events(token: Token) -> list[Event]:
    """Expand a fence or indented code token into start/text/end events."""
    info = token.info.strip() if token.type == "fence" else ""
    lang = info.split()[0] if info else None

    events = [Event(EventKind.CODE_BLOCK_START, lang=lang)]
    if token.content:
        events.append(Event(EventKind.TEXT, text=token.content))
    events.append(Event(EventKind.CODE_BLOCK_END))
    return events


def _inline_events(children: list[Token]) -> list[Event]:
    """Flatten the children of an inline token."""
    events: list[Event] = []
    # link_open carries the target; link_close is where the event is emitted
    open_links: list[tuple[str, str]] = []

    for child in children:
        if child.type in ("text", "text_special"):
            if child.content:
                events.append(Event(EventKind.TEXT, text=child.content))
        elif child.type == "code_inline":
            events.append(Event(EventKind.INLINE_CODE, text=child.content))
        elif child.type == "link_open":
            href = child.attrGet("href") or ""
            title = child.attrGet("title") or ""
            open_links.append((str(href), str(title)))
        elif child.type == "link_close":
            if open_links:
                url, title = open_links.pop()
                events.append(Event(EventKind.LINK_END, url=url, title=title))
        elif child.type in _INLINE_EVENTS:
            events.append(Event(_INLINE_EVENTS[child.type]))

    return events


def tokenize(text: str) -> list[Event]:
    """Tokenize a Markdown document into a flat event sequence.

    Args:
        text: Markdown source

    Returns:
        Events in document order
    """
    events: list[Event] = []

    for token in _get_markdown().parse(text):
        if token.type == "heading_open":
            events.append(Event(EventKind.HEADING_START, level=int(token.tag[1:])))
        elif token.type == "inline":
            events.extend(_inline_events(token.children or []))
        elif token.type in ("fence", "code_block"):
            events.extend(_code_block_events(token))
        elif token.type in _BLOCK_EVENTS:
            events.append(Event(_BLOCK_EVENTS[token.type]))

    return events
