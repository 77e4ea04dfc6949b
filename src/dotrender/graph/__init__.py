"""Graph rendering module for dotrender.

Callers describe their graph through the GraphSource and GraphTopology
capabilities; the DOT renderer turns it into Graphviz text.
"""

from .arrows import Arrow, ArrowShape, Fill, ShapeName, Side
from .dot import DotRenderer, default_options, render, render_opts, render_to_string
from .framework import GraphRenderer, GraphSource, GraphTopology
from .labels import Label, LabelKind, escape_html
from .models import Identifier, IdentifierError, Kind, RankDir, RenderOption, Style

__all__ = [
    "Arrow",
    "ArrowShape",
    "Fill",
    "ShapeName",
    "Side",
    "DotRenderer",
    "default_options",
    "render",
    "render_opts",
    "render_to_string",
    "GraphRenderer",
    "GraphSource",
    "GraphTopology",
    "Label",
    "LabelKind",
    "escape_html",
    "Identifier",
    "IdentifierError",
    "Kind",
    "RankDir",
    "RenderOption",
    "Style"
]
