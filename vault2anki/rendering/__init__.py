"""Rendering helpers for card markup."""

from vault2anki.rendering.code import CodeRenderer, get_code_renderer

__all__ = ["CodeRenderer", "get_code_renderer"]
