"""A text console that records styled text and renders it as HTML."""

from __future__ import annotations

import html
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

from .color import Color
from .font import FontStyle

DEFAULT_FONT_SIZE = 11
"""Default point size of console text."""

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """

_BOLD_STYLES = (FontStyle.BOLD, FontStyle.BOLD_ITALIC)
_ITALIC_STYLES = (FontStyle.ITALIC, FontStyle.BOLD_ITALIC)


@dataclass(frozen=True)
class TextStyle:
    """The colour, font style and point size of a run of text."""

    color: Color = Color.BLACK
    style: FontStyle = FontStyle.NORMAL
    size: int = DEFAULT_FONT_SIZE

    @property
    def is_bold(self) -> bool:
        return self.style in _BOLD_STYLES

    @property
    def is_italic(self) -> bool:
        return self.style in _ITALIC_STYLES

    def css(self) -> str:
        """The inline CSS that displays text in this style."""
        parts = [f"color:{self.color.to_html()};"]
        if self.is_bold:
            parts.append("font-weight:bold;")
        if self.is_italic:
            parts.append("font-style:italic;")
        parts.append(f"font-size:{self.size}pt;")
        return "".join(parts)


class ColorConsole:
    """A writable text stream whose text keeps the style it was written in.

    Text written is buffered until the style changes or the console is
    flushed; flushing re-renders the whole console into ``html``.
    """

    def __init__(self) -> None:
        self.style = TextStyle()
        self.contents: list[tuple[TextStyle, str]] = []
        self.html = ""
        self._buffer: list[str] = []

    def write(self, text: str) -> int:
        """Append text in the current style; returns the number of characters."""
        self._buffer.append(text)
        return len(text)

    def _flush_buffer(self) -> None:
        pending = "".join(self._buffer)
        if not pending:
            return
        self._buffer.clear()
        self.contents.append((self.style, pending))

    def flush(self) -> None:
        """Commit buffered text and refresh the rendered display."""
        self._flush_buffer()
        self.html = self.render_html()

    def clear(self) -> None:
        """Discard all text; the display changes at the next flush."""
        self._flush_buffer()
        self.contents.clear()

    def set_style(
        self,
        color: Color = Color.BLACK,
        style: FontStyle = FontStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Use a new style for text written from now on."""
        self._flush_buffer()
        self.style = TextStyle(color, style, size)

    @contextmanager
    def styled(
        self,
        color: Color | None = None,
        style: FontStyle | None = None,
        size: int | None = None,
    ) -> Iterator[ColorConsole]:
        """Temporarily change the given parts of the style.

        Parts left as None keep their current value. The previous style is
        restored on exit, whether or not the block raised.
        """
        previous = self.style
        changes = {
            name: value
            for name, value in (("color", color), ("style", style), ("size", size))
            if value is not None
        }
        updated = replace(previous, **changes)
        self.set_style(updated.color, updated.style, updated.size)
        try:
            yield self
        finally:
            self.set_style(previous.color, previous.style, previous.size)

    def render_html(self) -> str:
        """The committed contents as an HTML document, one span per run."""
        self._flush_buffer()
        spans = "".join(
            f'<span style="{style.css()}">{html.escape(text)}</span>'
            for style, text in self.contents
        )
        return _HTML_HEADER + spans + _HTML_FOOTER