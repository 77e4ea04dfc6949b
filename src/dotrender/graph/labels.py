"""Label text for nodes and edges with DOT escaping rules."""

import unicodedata
from dataclasses import dataclass
from enum import Enum

_SIMPLE_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
}


class LabelKind(str, Enum):
    """Escaping discipline of a label."""
    PLAIN = "plain"
    ESCAPED = "escaped"
    HTML = "html"


def escape_html(s: str) -> str:
    """Escape the characters that are special inside an HTML-like label."""
    return (
        s.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _escape_char(c: str) -> str:
    """Escape one character.

    ASCII, control and whitespace characters get their canonical escape form;
    everything else (Greek letters, symbols, ...) passes through unchanged.
    """
    if not (c.isascii() or unicodedata.category(c) == "Cc" or c.isspace()):
        return c
    if c in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[c]
    if " " <= c <= "~":
        return c
    return f"\\u{{{ord(c):x}}}"


def _escape_default(s: str) -> str:
    return "".join(_escape_char(c) for c in s)


def _escape_keep_backslash(s: str) -> str:
    # escString content: backslash introduces DOT escapes like \l and \n
    return "".join(c if c == "\\" else _escape_char(c) for c in s)


@dataclass(frozen=True)
class Label:
    """Text drawn for a node or edge.

    Build one with :meth:`plain`, :meth:`escaped` or :meth:`html`.
    """
    kind: LabelKind
    text: str

    @classmethod
    def plain(cls, text: str) -> "Label":
        """Ordinary text; every special character is escaped."""
        return cls(LabelKind.PLAIN, text)

    @classmethod
    def escaped(cls, text: str) -> "Label":
        """Text already written in DOT escString syntax (``\\l``, ``\\n``...)."""
        return cls(LabelKind.ESCAPED, text)

    @classmethod
    def html(cls, text: str) -> "Label":
        """HTML-like label, emitted between angle brackets without escaping."""
        return cls(LabelKind.HTML, text)

    def to_dot_string(self) -> str:
        """Render the label as a DOT attribute value."""
        if self.kind == LabelKind.PLAIN:
            return f'"{_escape_default(self.text)}"'
        if self.kind == LabelKind.ESCAPED:
            return f'"{_escape_keep_backslash(self.text)}"'
        return f"<{self.text}>"

    def pre_escaped_content(self) -> str:
        """Content usable inside an escaped label rendering the same text."""
        if self.kind == LabelKind.PLAIN and "\\" in self.text:
            return _escape_default(self.text)
        return self.text

    def stack_above(self, lower: "Label") -> "Label":
        """Return an escaped label showing this text, a blank line, then ``lower``."""
        return Label.escaped(
            self.pre_escaped_content() + "\\n\\n" + lower.pre_escaped_content()
        )

    def stack_below(self, upper: "Label") -> "Label":
        """Return an escaped label showing ``upper``, a blank line, then this text."""
        return upper.stack_above(self)

    def __str__(self) -> str:
        return self.to_dot_string()
