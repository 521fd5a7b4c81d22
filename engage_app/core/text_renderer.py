"""Markdown rendering for participant-submitted text.

Architecture note:
    Poll questions and Q&A questions are typed by people in the room, so the
    renderer runs markdown-it in commonmark mode with raw HTML disabled. Any
    tags in the input come out escaped, and the presentation layer can insert
    the fragment as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownTextRenderer:
    """Converts short markdown snippets into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)


renderer = MarkdownTextRenderer()
