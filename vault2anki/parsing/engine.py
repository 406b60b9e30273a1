"""Card parser: segments a Markdown event stream into flashcards.

Every heading opens a new card. The first text run after the heading becomes
the card front; everything up to the next heading is rendered into the back.
List items are collected as bullets and appended to the back when the card is
sealed. Fenced code is highlighted when the block closes.

The parser tracks where incoming text belongs with an explicit destination
(title, body, list item, code block). Titles and code blocks push the enclosing
destination and resume it when they close, so code inside a list item stays in
the item. Closing a list item always returns to the body, even when the item
was nested inside another one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from html import escape

from vault2anki.parsing.events import Event, EventKind
from vault2anki.parsing.tokenizer import tokenize
from vault2anki.rendering.code import CodeRenderer, get_code_renderer
from vault2anki.schemas.cards import Card
from vault2anki.utils.logging import get_logger

logger = get_logger(__name__)

LINE_BREAK = "<br>"
BULLET_MARKER = "- "


class Destination(str, Enum):
    """Where the next text event is written."""

    TITLE = "title"
    BODY = "body"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"


def render_inline_code(code: str) -> str:
    """Render an inline code span."""
    return f"<code>{escape(code, quote=False)}</code>"


def wrap_code_block(rendered: str) -> str:
    """Wrap highlighted code in a left-aligned container."""
    return f'<div style="text-align: left;">{rendered}</div>'


class CardParser:
    """Stateful fold over the events of a single document.

    Use one parser per document. ``parse`` resets all state before it starts,
    so an instance may be reused for several documents in sequence but must
    not be shared between concurrent callers.
    """

    def __init__(self, renderer: CodeRenderer | None = None) -> None:
        self._renderer = renderer or get_code_renderer()
        self._handlers: dict[EventKind, Callable[[Event], None]] = {
            EventKind.HEADING_START: self._on_heading_start,
            EventKind.HEADING_END: self._on_heading_end,
            EventKind.TEXT: self._on_text,
            EventKind.INLINE_CODE: self._on_inline_code,
            EventKind.SOFT_BREAK: self._on_break,
            EventKind.HARD_BREAK: self._on_break,
            EventKind.LIST_START: self._on_list_start,
            EventKind.LIST_END: self._on_list_end,
            EventKind.ITEM_START: self._on_item_start,
            EventKind.ITEM_END: self._on_item_end,
            # Block quotes are collected like list items
            EventKind.BLOCK_QUOTE_START: self._on_item_start,
            EventKind.BLOCK_QUOTE_END: self._on_item_end,
            EventKind.CODE_BLOCK_START: self._on_code_block_start,
            EventKind.CODE_BLOCK_END: self._on_code_block_end,
            EventKind.LINK_END: self._on_link_end,
        }
        self._reset()

    def _reset(self) -> None:
        self._cards: list[Card] = []
        self._card: Card | None = None
        self._destination = Destination.BODY
        self._suspended: list[Destination] = []
        self._list_depth = 0
        self._item_buffer = ""
        self._code_buffer = ""
        self._code_lang: str | None = None

    @property
    def parsing(self) -> bool:
        """Whether a heading has been seen and a card is open."""
        return self._card is not None

    @property
    def in_list(self) -> bool:
        return self._list_depth > 0

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def current_card(self) -> Card | None:
        return self._card

    def parse(self, events: Iterable[Event]) -> list[Card]:
        """Parse a complete event sequence.

        Args:
            events: Events for one document, in order

        Returns:
            Valid cards in heading order
        """
        self._reset()
        for event in events:
            self.feed(event)
        return self.finish()

    def feed(self, event: Event) -> None:
        """Apply a single event."""
        self._handlers[event.kind](event)

    def finish(self) -> list[Card]:
        """Seal the open card and return everything emitted so far."""
        self._seal()
        cards = self._cards
        self._reset()
        return cards

    def _enter(self, destination: Destination) -> None:
        self._suspended.append(self._destination)
        self._destination = destination

    def _leave(self, destination: Destination) -> None:
        if self._destination is not destination:
            return
        self._destination = (
            self._suspended.pop() if self._suspended else Destination.BODY
        )

    def _seal(self) -> None:
        card = self._card
        if card is None:
            return

        for bullet in card.bullets:
            if bullet:
                card.back += f"{LINE_BREAK}{BULLET_MARKER}{bullet}"

        if card.is_valid():
            self._cards.append(card)
        else:
            logger.debug(f"Dropping card without title or content: {card.front!r}")

    def _append(self, markup: str) -> None:
        """Append markup to the open list item, or else to the card back."""
        if self._destination is Destination.LIST_ITEM:
            self._item_buffer += markup
        elif self._card is not None:
            self._card.back += markup

    def _on_heading_start(self, event: Event) -> None:
        self._seal()
        self._card = Card()
        self._enter(Destination.TITLE)

    def _on_heading_end(self, event: Event) -> None:
        self._leave(Destination.TITLE)

    def _on_text(self, event: Event) -> None:
        if self._destination is Destination.TITLE:
            if self._card is not None:
                self._card.front = escape(event.text, quote=False)
            self._leave(Destination.TITLE)
        elif self._destination is Destination.CODE_BLOCK:
            self._code_buffer += event.text
        else:
            self._append(escape(event.text, quote=False))

    def _on_break(self, event: Event) -> None:
        # Breaks always land in the back, even inside a list item.
        if self._card is not None:
            self._card.back += LINE_BREAK

    def _on_inline_code(self, event: Event) -> None:
        if not event.text:
            return
        self._append(render_inline_code(event.text))

    def _on_list_start(self, event: Event) -> None:
        if self._card is not None:
            self._list_depth += 1

    def _on_list_end(self, event: Event) -> None:
        if self._list_depth:
            self._list_depth -= 1

    def _on_item_start(self, event: Event) -> None:
        self._destination = Destination.LIST_ITEM

    def _on_item_end(self, event: Event) -> None:
        if self._card is not None:
            self._card.bullets.append(self._item_buffer)
        self._item_buffer = ""
        # Closing any item, nested or not, returns text to the back.
        if self._destination is Destination.LIST_ITEM:
            self._destination = Destination.BODY

    def _on_code_block_start(self, event: Event) -> None:
        self._code_lang = event.lang or None
        self._code_buffer = ""
        self._enter(Destination.CODE_BLOCK)

    def _on_code_block_end(self, event: Event) -> None:
        self._leave(Destination.CODE_BLOCK)
        code, lang = self._code_buffer, self._code_lang
        self._code_buffer = ""
        self._code_lang = None

        if not code or self._card is None:
            return
        self._append(wrap_code_block(self._renderer.render(code, lang)))

    def _on_link_end(self, event: Event) -> None:
        if self._card is not None:
            self._card.links.append(event.url)


def parse(events: Iterable[Event], renderer: CodeRenderer | None = None) -> list[Card]:
    """Segment an event sequence into cards with a fresh parser."""
    return CardParser(renderer).parse(events)


def parse_markdown(text: str, renderer: CodeRenderer | None = None) -> list[Card]:
    """Tokenize and segment a Markdown document.

    Args:
        text: Markdown source of one note
        renderer: Code renderer, defaults to the shared instance

    Returns:
        Valid cards in heading order
    """
    return parse(tokenize(text), renderer)
