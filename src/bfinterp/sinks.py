"""
Output sinks.

A sink receives the finished program output once per run. The interpreter only
calls ``render``; creating the sink (and whatever document, widget or stream
it writes into) is up to the caller.
"""
from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from typing import Any, Optional, Protocol, TextIO

CSS_CLASS = 'bfjs'


class OutputSink(Protocol):
    def render(self, text: str) -> None:
        ...


class ConsoleSink:
    """
    Print the output followed by a newline, like a console log.

    Characters the stream cannot encode, such as lone surrogates, are written
    as backslash escapes.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def render(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        encoding = getattr(stream, "encoding", None)
        if encoding:
            text = text.encode(encoding, "backslashreplace").decode(encoding)
        stream.write(text + "\n")
        stream.flush()


class ElementSink:
    """Append ``<div class="bfjs">`` holding the output under ``element``."""

    def __init__(self, element: ET.Element):
        self.element = element

    def render(self, text: str) -> None:
        div = ET.SubElement(self.element, 'div', {'class': CSS_CLASS})
        div.text = text


class QtWidgetSink:
    """
    Append the output as a new block of a PyQt5 text widget.

    Works with QTextEdit and QPlainTextEdit. Needs the ``qt`` extra.
    """

    def __init__(self, widget: Any):
        self.widget = widget

    def render(self, text: str) -> None:
        from PyQt5.QtGui import QTextCursor

        cursor = self.widget.textCursor()
        cursor.movePosition(QTextCursor.End)
        if not self.widget.document().isEmpty():
            cursor.insertBlock()
        cursor.insertText(text)
        self.widget.setTextCursor(cursor)
