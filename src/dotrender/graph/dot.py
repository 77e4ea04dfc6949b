"""Graphviz DOT renderer for caller-supplied graphs."""

import io
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .framework import GraphRenderer, GraphSource
from .models import Kind, RenderOption, Style

if TYPE_CHECKING:
    from ..config import DotRenderConfig

logger = logging.getLogger(__name__)

INDENT = "    "

_REQUIRED_METHODS = ("graph_id", "node_id", "nodes", "edges", "source", "target")


def default_options() -> frozenset[RenderOption]:
    """The empty option set: nothing is suppressed."""
    return frozenset()


def _normalize_options(options: Iterable[RenderOption | str] | None) -> frozenset[RenderOption]:
    if options is None:
        return default_options()
    if isinstance(options, str):
        # a lone option, including RenderOption members which are str too
        options = (options,)
    try:
        return frozenset(RenderOption(option) for option in options)
    except ValueError as e:
        valid = [option.value for option in RenderOption]
        raise ValueError(f"{e}. Valid render options: {valid}") from e


def _check_graph(graph: Any) -> None:
    missing = [name for name in _REQUIRED_METHODS if not callable(getattr(graph, name, None))]
    if missing:
        raise TypeError(
            f"{type(graph).__name__} does not implement GraphSource and GraphTopology "
            f"(missing: {', '.join(missing)})"
        )


def _source_call(graph: Any, name: str, *args: Any) -> Any:
    """Call an optional GraphSource accessor, falling back to its default."""
    method = getattr(graph, name, None)
    if callable(method):
        return method(*args)
    return getattr(GraphSource, name)(graph, *args)


def _style_attr(style: Style) -> str:
    return f'[style="{style.value}"]'


def _custom_attrs(attrs) -> str:
    return "".join(f"[{name}={value}]" for name, value in attrs.items())


def render(graph: Any, sink) -> None:
    """Write ``graph`` as DOT to ``sink`` with no attributes suppressed."""
    render_opts(graph, sink, default_options())


def render_opts(graph: Any, sink, options: Iterable[RenderOption | str] | None = None) -> None:
    """Write ``graph`` as DOT to ``sink``.

    Args:
        graph: Object with the GraphTopology methods plus graph_id and
            node_id; missing GraphSource accessors use their defaults
        sink: Any object with a ``write(str)`` method (file, StringIO, ...)
        options: RenderOption values (or their string names), or a single
            one, suppressing categories of attributes

    Raises:
        TypeError: If ``graph`` lacks the required capability methods
        ValueError: If an option is not a known RenderOption

    Exceptions raised by ``sink.write`` propagate unchanged; anything already
    written stays in the sink.
    """
    _check_graph(graph)
    options = _normalize_options(options)

    kind = _source_call(graph, "kind")
    graph_id = graph.graph_id()
    logger.debug(
        f"Rendering {kind.keyword} {graph_id.name} with options "
        f"{sorted(option.value for option in options)}"
    )

    sink.write(f"{kind.keyword} {graph_id.name} {{\n")

    if kind == Kind.DIGRAPH:
        rank_dir = _source_call(graph, "rank_dir")
        if rank_dir is not None:
            sink.write(f'{INDENT}rankdir="{rank_dir.value}";\n')

    for name, value in _source_call(graph, "graph_attrs").items():
        sink.write(f"{name}={value}\n")

    node_count = 0
    for node in graph.nodes():
        sink.write(_render_node(graph, node, options))
        node_count += 1

    edge_count = 0
    for edge in graph.edges():
        sink.write(_render_edge(graph, edge, kind, options))
        edge_count += 1

    sink.write("}\n")
    logger.debug(f"Rendered {graph_id.name}: {node_count} nodes, {edge_count} edges")


def _render_node(graph: Any, node: Any, options: frozenset[RenderOption]) -> str:
    parts = [INDENT, graph.node_id(node).name]

    if RenderOption.NO_NODE_LABELS not in options:
        label = _source_call(graph, "node_label", node)
        parts.append(f"[label={label.to_dot_string()}]")

    style = _source_call(graph, "node_style", node)
    if RenderOption.NO_NODE_STYLES not in options and style != Style.NONE:
        parts.append(_style_attr(style))

    color = _source_call(graph, "node_color", node)
    if RenderOption.NO_NODE_COLORS not in options and color is not None:
        parts.append(f"[color={color.to_dot_string()}]")

    shape = _source_call(graph, "node_shape", node)
    if shape is not None:
        parts.append(f"[shape={shape.to_dot_string()}]")

    parts.append(_custom_attrs(_source_call(graph, "node_attrs", node)))
    parts.append(";\n")
    return "".join(parts)


def _render_edge(graph: Any, edge: Any, kind: Kind, options: frozenset[RenderOption]) -> str:
    source_id = graph.node_id(graph.source(edge))
    target_id = graph.node_id(graph.target(edge))
    parts = [INDENT, f"{source_id.name} {kind.edgeop} {target_id.name}"]

    if RenderOption.NO_EDGE_LABELS not in options:
        label = _source_call(graph, "edge_label", edge)
        parts.append(f"[label={label.to_dot_string()}]")

    style = _source_call(graph, "edge_style", edge)
    if RenderOption.NO_EDGE_STYLES not in options and style != Style.NONE:
        parts.append(_style_attr(style))

    color = _source_call(graph, "edge_color", edge)
    if RenderOption.NO_EDGE_COLORS not in options and color is not None:
        parts.append(f"[color={color.to_dot_string()}]")

    start_arrow = _source_call(graph, "edge_start_arrow", edge)
    end_arrow = _source_call(graph, "edge_end_arrow", edge)
    if RenderOption.NO_ARROWS not in options and (
        not start_arrow.is_default() or not end_arrow.is_default()
    ):
        parts.append("[")
        if not end_arrow.is_default():
            parts.append(f'arrowhead="{end_arrow.to_dot_string()}"')
        if not start_arrow.is_default():
            parts.append(f' dir="both" arrowtail="{start_arrow.to_dot_string()}"')
        parts.append("]")

    parts.append(_custom_attrs(_source_call(graph, "edge_attrs", edge)))
    parts.append(";\n")
    return "".join(parts)


def render_to_string(graph: Any, options: Iterable[RenderOption | str] | None = None) -> str:
    """Render ``graph`` and return the DOT text."""
    buffer = io.StringIO()
    render_opts(graph, buffer, options)
    return buffer.getvalue()


class DotRenderer(GraphRenderer):
    """Graphviz DOT renderer usable alongside other format renderers."""

    def __init__(
        self,
        options: Iterable[RenderOption | str] | None = None,
        config: "DotRenderConfig | None" = None,
    ):
        if config is not None and options is not None:
            raise ValueError("Pass either options or config, not both")
        if config is not None:
            options = config.option_set()
        self.options = _normalize_options(options)

    @property
    def format_name(self) -> str:
        return "dot"

    def get_file_extension(self) -> str:
        return ".dot"

    def render(self, graph: Any) -> str:
        """Render graph as DOT text."""
        logger.info(f"Rendering graph with {self.format_name} renderer")
        return render_to_string(graph, self.options)
