"""dotrender - render caller-owned graphs as Graphviz DOT text.

The caller implements GraphSource and GraphTopology over its own graph
structure; dotrender writes a regular, restricted subset of the DOT language
to any writable sink.
"""

__version__ = "0.1.0"
__description__ = "Render caller-owned graphs as Graphviz DOT text"

from dotrender.config import DotRenderConfig, configure_logging, load_config
from dotrender.graph import (
    Arrow,
    ArrowShape,
    DotRenderer,
    Fill,
    GraphSource,
    GraphTopology,
    Identifier,
    IdentifierError,
    Kind,
    Label,
    RankDir,
    RenderOption,
    Side,
    Style,
    default_options,
    escape_html,
    render,
    render_opts,
    render_to_string,
)

__all__ = [
    "__version__",
    "__description__",
    "DotRenderConfig",
    "configure_logging",
    "load_config",
    "Arrow",
    "ArrowShape",
    "DotRenderer",
    "Fill",
    "GraphSource",
    "GraphTopology",
    "Identifier",
    "IdentifierError",
    "Kind",
    "Label",
    "RankDir",
    "RenderOption",
    "Side",
    "Style",
    "default_options",
    "escape_html",
    "render",
    "render_opts",
    "render_to_string",
]
