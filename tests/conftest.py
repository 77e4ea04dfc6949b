"""Shared fixture graphs for rendering tests."""

from dataclasses import dataclass, field

import pytest

from dotrender.graph import (
    Arrow,
    GraphSource,
    GraphTopology,
    Identifier,
    Kind,
    Label,
    RankDir,
    Style,
)


def node_name(n: int) -> Identifier:
    return Identifier(f"N{n}")


@dataclass
class Edge:
    """Edge between two integer nodes with its presentation."""
    source: int
    target: int
    label: str = ""
    style: Style = Style.NONE
    color: str | None = None
    start_arrow: Arrow = field(default_factory=Arrow.default)
    end_arrow: Arrow = field(default_factory=Arrow.default)


class LabelledGraph(GraphSource, GraphTopology):
    """Graph over nodes 0..n-1 with optional per-node labels and styles."""

    def __init__(self, name: str, node_labels: list[str | None], edges: list[Edge],
                 node_styles: list[Style] | None = None):
        self.name = name
        self.node_labels = node_labels
        self.edge_list = edges
        self.node_styles = node_styles or [Style.NONE] * len(node_labels)

    @classmethod
    def unlabelled(cls, name: str, count: int, edges: list[Edge] | None = None,
                   node_styles: list[Style] | None = None) -> "LabelledGraph":
        return cls(name, [None] * count, edges or [], node_styles)

    def graph_id(self) -> Identifier:
        return Identifier(self.name)

    def node_id(self, node: int) -> Identifier:
        return node_name(node)

    def node_label(self, node: int) -> Label:
        label = self.node_labels[node]
        if label is None:
            return Label.plain(node_name(node).name)
        return Label.plain(label)

    def node_style(self, node: int) -> Style:
        return self.node_styles[node]

    def edge_label(self, edge: Edge) -> Label:
        return Label.plain(edge.label)

    def edge_style(self, edge: Edge) -> Style:
        return edge.style

    def edge_color(self, edge: Edge) -> Label | None:
        if edge.color is None:
            return None
        return Label.plain(edge.color)

    def edge_start_arrow(self, edge: Edge) -> Arrow:
        return edge.start_arrow

    def edge_end_arrow(self, edge: Edge) -> Arrow:
        return edge.end_arrow

    def nodes(self) -> list[int]:
        return list(range(len(self.node_labels)))

    def edges(self) -> list[Edge]:
        return self.edge_list

    def source(self, edge: Edge) -> int:
        return edge.source

    def target(self, edge: Edge) -> int:
        return edge.target


class EscapedLabelGraph(LabelledGraph):
    """Same graph, but every label and color is treated as pre-escaped text."""

    def node_label(self, node: int) -> Label:
        return Label.escaped(super().node_label(node).text)

    def edge_label(self, edge: Edge) -> Label:
        return Label.escaped(super().edge_label(edge).text)

    def edge_color(self, edge: Edge) -> Label | None:
        color = super().edge_color(edge)
        return None if color is None else Label.escaped(color.text)


class DefaultStyleGraph(GraphSource, GraphTopology):
    """Graph that only implements the required capability methods."""

    def __init__(self, name: str, count: int, edges: list[tuple[int, int]],
                 kind: Kind = Kind.DIGRAPH, rank_dir: RankDir | None = None):
        self.name = name
        self.count = count
        self.edge_list = edges
        self._kind = kind
        self._rank_dir = rank_dir

    def graph_id(self) -> Identifier:
        return Identifier(self.name)

    def node_id(self, node: int) -> Identifier:
        return node_name(node)

    def kind(self) -> Kind:
        return self._kind

    def rank_dir(self) -> RankDir | None:
        return self._rank_dir

    def nodes(self) -> list[int]:
        return list(range(self.count))

    def edges(self) -> list[tuple[int, int]]:
        return self.edge_list

    def source(self, edge: tuple[int, int]) -> int:
        return edge[0]

    def target(self, edge: tuple[int, int]) -> int:
        return edge[1]


class AttributedGraph(DefaultStyleGraph):
    """Graph carrying graph, node and edge attribute maps plus colors and shapes."""

    def graph_attrs(self) -> dict[str, str]:
        return {"splines": "ortho", "bgcolor": '"white"'}

    def node_shape(self, node: int) -> Label | None:
        return Label.plain("box") if node == 0 else None

    def node_color(self, node: int) -> Label | None:
        return Label.plain("red") if node == 1 else None

    def node_attrs(self, node: int) -> dict[str, str]:
        return {"fontsize": "10", "penwidth": "2"} if node == 0 else {}

    def edge_style(self, edge: tuple[int, int]) -> Style:
        return Style.DASHED

    def edge_color(self, edge: tuple[int, int]) -> Label | None:
        return Label.plain("blue")

    def edge_end_arrow(self, edge: tuple[int, int]) -> Arrow:
        return Arrow.normal()

    def edge_attrs(self, edge: tuple[int, int]) -> dict[str, str]:
        return {"weight": "3"}


@pytest.fixture
def hasse_graph() -> LabelledGraph:
    """Hasse diagram of the subsets of {x, y} with colored edges."""
    return LabelledGraph(
        "hasse_diagram",
        ["{x,y}", "{x}", "{y}", "{}"],
        [
            Edge(0, 1, color="green"),
            Edge(0, 2, color="blue"),
            Edge(1, 3, color="red"),
            Edge(2, 3, color="black"),
        ],
    )


@pytest.fixture
def attributed_graph() -> AttributedGraph:
    return AttributedGraph("attrs", 2, [(0, 1)])
