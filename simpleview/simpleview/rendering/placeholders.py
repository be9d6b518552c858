"""Named content placeholders shared between templates and layouts.

A placeholder is an append-only text slot. Templates fill placeholders while
they render (either by capturing a block of output or by setting content
directly) and layouts read them back to assemble the final page.

Only one capture may be open at a time. Nested captures are rejected.
"""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from typing import Iterator

from ..core.errors import CaptureAlreadyActive, InvalidArgument, NoActiveCapture

logger = logging.getLogger(__name__)

# Inline scripts included at the bottom of the page (wrap them in <script> tags)
INLINE_SCRIPTS = "inline-scripts"
# Content placed in the HEAD of the page
HEAD_CONTENT = "head-content"
# Content placed after all html and before JavaScript
FOOTER_CONTENT = "footer-content"
# Output of the rendered template, inserted into a layout
TMPL_CONTENT = "tmpl-content"
PAGE_ID = "page-id"
PAGE_CLASS = "page-class"
META_TITLE = "meta-title"
META_DESCRIPTION = "meta-description"
META_KEYWORDS = "meta-keywords"
# Used by 3rd party social and sharing sites
META_IMAGE = "meta-image"

RESERVED_PLACEHOLDERS = (
    TMPL_CONTENT,
    HEAD_CONTENT,
    FOOTER_CONTENT,
    INLINE_SCRIPTS,
    PAGE_ID,
    PAGE_CLASS,
    META_TITLE,
    META_DESCRIPTION,
    META_KEYWORDS,
    META_IMAGE,
)


def _validate_name(name: object) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgument("You must provide a valid placeholder name")
    return name


class PlaceholderStore:
    """Accumulates text per placeholder name and tracks the active capture."""

    def __init__(self) -> None:
        self._content: dict[str, str] = {}
        self._active_name: str | None = None
        self._buffer: io.StringIO | None = None

    @property
    def active_capture(self) -> str | None:
        """Name of the placeholder currently being captured."""
        return self._active_name

    def __contains__(self, name: object) -> bool:
        return name in self._content

    def _open(self, name: str) -> io.StringIO:
        _validate_name(name)
        if self._active_name is not None:
            raise CaptureAlreadyActive(self._active_name, name)
        buffer = io.StringIO()
        self._active_name, self._buffer = name, buffer
        return buffer

    def capture_start(self, name: str) -> None:
        """Start capturing output for ``name``. Captures are additive."""
        self._open(name)

    def write(self, text: str) -> None:
        """Write ``text`` into the active capture."""
        if self._buffer is None:
            raise NoActiveCapture("Tried to write to a placeholder capture that was never started")
        self._buffer.write(text)

    def capture_end(self) -> str:
        """Stop the active capture and append what it collected.

        Returns:
            The text captured since :meth:`capture_start`
        """
        if self._active_name is None or self._buffer is None:
            raise NoActiveCapture()

        name, captured = self._active_name, self._buffer.getvalue()
        self._active_name = None
        self._buffer = None

        self._content[name] = self._content.get(name, "") + captured
        logger.debug(f"Captured {len(captured)} character(s) into placeholder {name!r}")
        return captured

    def abort_capture(self) -> None:
        """Drop the active capture without storing anything."""
        self._active_name = None
        self._buffer = None

    @contextmanager
    def capture(self, name: str) -> Iterator[io.StringIO]:
        """Capture everything written to the yielded buffer into ``name``.

        If the block raises, the captured text is discarded and the capture
        slot is released before the exception propagates.
        """
        buffer = self._open(name)
        try:
            yield buffer
        except BaseException:
            self.abort_capture()
            raise
        self.capture_end()

    def set_content(self, name: str, content: str) -> None:
        """Append ``content`` to ``name`` without going through a capture."""
        _validate_name(name)
        if not isinstance(content, str):
            raise InvalidArgument("You must provide valid string content")
        self._content[name] = self._content.get(name, "") + content

    def get_content(self, name: str) -> str | None:
        """Return the content of ``name``, or None if it was never written."""
        _validate_name(name)
        return self._content.get(name)

    def delete_content(self, name: str) -> None:
        """Remove ``name`` entirely. Removing a missing name is a no-op."""
        _validate_name(name)
        self._content.pop(name, None)

    def reset(self) -> None:
        """Forget every placeholder and any open capture."""
        self._content.clear()
        self.abort_capture()
