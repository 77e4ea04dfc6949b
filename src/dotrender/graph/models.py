"""Value types for DOT rendering: identifiers and fixed vocabularies."""

from enum import Enum


class IdentifierError(ValueError):
    """Raised when text is not a legal bare DOT identifier."""
    pass


def _is_letter_or_underscore(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def _is_constituent(c: str) -> bool:
    return _is_letter_or_underscore(c) or "0" <= c <= "9"


class Identifier:
    """A bare identifier usable as a graph or node name.

    The text must match ``[A-Za-z_][A-Za-z_0-9]*``. Only ASCII letters are
    accepted; no trimming or normalisation is applied.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str):
        if not self.is_valid(name):
            raise IdentifierError(f"Invalid DOT identifier: {name!r}")
        self._name = name

    @staticmethod
    def is_valid(name: str) -> bool:
        """Check whether ``name`` is a legal identifier without raising."""
        if not isinstance(name, str) or not name:
            return False
        if not _is_letter_or_underscore(name[0]):
            return False
        return all(_is_constituent(c) for c in name[1:])

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Identifier({self._name!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)


class Style(str, Enum):
    """Node and edge styles. NONE means the attribute is omitted."""
    NONE = ""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    ROUNDED = "rounded"
    DIAGONALS = "diagonals"
    FILLED = "filled"
    STRIPED = "striped"
    WEDGED = "wedged"


class RankDir(str, Enum):
    """Layout direction of a directed graph."""
    TOP_BOTTOM = "TB"
    LEFT_RIGHT = "LR"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"


class Kind(str, Enum):
    """Graph kind: selects the keyword and the edge operator."""
    DIGRAPH = "digraph"
    GRAPH = "graph"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def edgeop(self) -> str:
        return "->" if self is Kind.DIGRAPH else "--"


class RenderOption(str, Enum):
    """Flags that suppress one category of optional attributes."""
    NO_EDGE_LABELS = "no_edge_labels"
    NO_NODE_LABELS = "no_node_labels"
    NO_EDGE_STYLES = "no_edge_styles"
    NO_EDGE_COLORS = "no_edge_colors"
    NO_NODE_STYLES = "no_node_styles"
    NO_NODE_COLORS = "no_node_colors"
    NO_ARROWS = "no_arrows"
