"""Flashcard schemas."""

from pydantic import BaseModel, Field


class Card(BaseModel):
    """A flashcard segmented from a Markdown note.

    The engine owns a card while its heading section is being read and
    mutates it in place; once sealed it is only ever read.
    """

    front: str = Field("", description="Heading text used as the prompt")
    back: str = Field("", description="Rendered body markup")
    bullets: list[str] = Field(
        default_factory=list, description="List item text in document order"
    )
    links: list[str] = Field(
        default_factory=list, description="Link URLs in encounter order"
    )

    def is_valid(self) -> bool:
        """Return whether the card has a title and at least some content."""
        return bool(self.front) and bool(self.back or self.bullets or self.links)
