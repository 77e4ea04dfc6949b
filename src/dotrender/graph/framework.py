"""Capability interfaces a caller implements to have a graph rendered."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from .arrows import Arrow
from .labels import Label
from .models import Identifier, Kind, RankDir, Style


class GraphSource(ABC):
    """Identifiers and presentational attributes of a graph.

    Only :meth:`graph_id` and :meth:`node_id` are required. Every other method
    has a default that produces a plain, unstyled rendering.
    """

    @abstractmethod
    def graph_id(self) -> Identifier:
        """Identifier of the graph itself."""
        pass

    @abstractmethod
    def node_id(self, node: Any) -> Identifier:
        """Identifier of ``node``; must be unique per node."""
        pass

    def graph_attrs(self) -> Mapping[str, str]:
        return {}

    def node_shape(self, node: Any) -> Label | None:
        return None

    def node_label(self, node: Any) -> Label:
        return Label.plain(self.node_id(node).name)

    def node_style(self, node: Any) -> Style:
        return Style.NONE

    def node_color(self, node: Any) -> Label | None:
        return None

    def node_attrs(self, node: Any) -> Mapping[str, str]:
        return {}

    def edge_label(self, edge: Any) -> Label:
        return Label.plain("")

    def edge_style(self, edge: Any) -> Style:
        return Style.NONE

    def edge_color(self, edge: Any) -> Label | None:
        return None

    def edge_start_arrow(self, edge: Any) -> Arrow:
        return Arrow.default()

    def edge_end_arrow(self, edge: Any) -> Arrow:
        return Arrow.default()

    def edge_attrs(self, edge: Any) -> Mapping[str, str]:
        return {}

    def kind(self) -> Kind:
        return Kind.DIGRAPH

    def rank_dir(self) -> RankDir | None:
        return None


class GraphTopology(ABC):
    """Node and edge enumeration of a graph.

    Sequence order is the order in which lines are written.
    """

    @abstractmethod
    def nodes(self) -> Sequence[Any]:
        pass

    @abstractmethod
    def edges(self) -> Sequence[Any]:
        pass

    @abstractmethod
    def source(self, edge: Any) -> Any:
        """Node an edge starts from."""
        pass

    @abstractmethod
    def target(self, edge: Any) -> Any:
        """Node an edge points to."""
        pass


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, graph: Any) -> str:
        """Render a graph to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass
