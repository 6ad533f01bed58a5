"""Single-pass tag stripper.

Removes tags and comments from HTML/XML-like text and keeps everything else.
Malformed markup never raises; it is resolved by a few fixed heuristics:

- a ``<`` followed directly by whitespace is text, not a tag opener;
- ``<`` and ``>`` inside a quoted attribute value are not structural;
- stray ``<`` inside a tag is matched against a later ``>`` before the tag closes;
- comments start with ``<!--`` and end at a ``>`` preceded by ``--``.
"""

from __future__ import annotations

_WHITESPACE = " \t\n\r"
_COMMENT_OPENER = ["<", "!", "-"]
_BARE_OPEN = ["<"]


class TagStripper:
    PLAINTEXT = 0
    TAG = 1
    COMMENT = 2

    __slots__ = (
        "buffer",
        "depth",
        "length",
        "output",
        "pos",
        "quote_char",
        "state",
        "tag_buffer",
    )

    def __init__(self) -> None:
        self.state = self.PLAINTEXT
        self.buffer = ""
        self.length = 0
        self.pos = 0
        self.depth = 0
        self.quote_char: str | None = None

        # Reusable buffers, cleared on every run.
        self.output: list[str] = []
        self.tag_buffer: list[str] = []

    def run(self, html: str) -> str:
        self.buffer = html
        self.length = len(html)
        self.pos = 0
        self.state = self.PLAINTEXT
        self.depth = 0
        self.quote_char = None
        self.output.clear()
        self.tag_buffer.clear()

        while True:
            state = self.state
            if state == self.PLAINTEXT:
                if self._state_plaintext():
                    break
            elif state == self.TAG:
                if self._state_tag():
                    break
            elif self._state_comment():
                break

        result = "".join(self.output)
        self.output.clear()
        self.buffer = ""
        return result

    # ---------------------
    # State handlers
    #
    # Each handler consumes input from self.pos and returns True once the
    # input is exhausted, False after switching to another state.
    # ---------------------

    def _state_plaintext(self) -> bool:
        pos = self.pos
        end = self.buffer.find("<", pos)
        if end == -1:
            if pos < self.length:
                self.output.append(self.buffer[pos:])
            self.pos = self.length
            return True
        if end > pos:
            self.output.append(self.buffer[pos:end])
        self.tag_buffer.append("<")
        self.pos = end + 1
        self.state = self.TAG
        return False

    def _state_tag(self) -> bool:
        buffer = self.buffer
        length = self.length
        tag_buffer = self.tag_buffer
        pos = self.pos
        while pos < length:
            c = buffer[pos]
            pos += 1
            if c == "<":
                if self.quote_char is None:
                    self.depth += 1
                continue
            if c == ">":
                if self.quote_char is not None:
                    continue
                if self.depth != 0:
                    self.depth -= 1
                    continue
                tag_buffer.clear()
                self.pos = pos
                self.state = self.PLAINTEXT
                return False
            if c == '"' or c == "'":
                if self.quote_char is None:
                    self.quote_char = c
                elif self.quote_char == c:
                    self.quote_char = None
                tag_buffer.append(c)
                continue
            if c == "-":
                opens_comment = tag_buffer == _COMMENT_OPENER
                tag_buffer.append(c)
                if opens_comment:
                    self.pos = pos
                    self.state = self.COMMENT
                    return False
                continue
            if c in _WHITESPACE:
                if tag_buffer == _BARE_OPEN:
                    # Not a tag name; give the "<" back as text. The emitted
                    # separator is always a plain space.
                    self.output.append("< ")
                    tag_buffer.clear()
                    self.pos = pos
                    self.state = self.PLAINTEXT
                    return False
                tag_buffer.append(c)
                continue
            tag_buffer.append(c)
        self.pos = length
        return True

    def _state_comment(self) -> bool:
        buffer = self.buffer
        length = self.length
        tag_buffer = self.tag_buffer
        pos = self.pos
        while pos < length:
            c = buffer[pos]
            pos += 1
            if c != ">":
                tag_buffer.append(c)
                continue
            # Only the characters since the previous ">" count.
            closed = tag_buffer[-2:] == ["-", "-"]
            tag_buffer.clear()
            if closed:
                self.pos = pos
                self.state = self.PLAINTEXT
                return False
        self.pos = length
        return True


def strip_tags(html: str) -> str:
    """Return the text of ``html`` with tags and comments removed."""
    return TagStripper().run(html)
