"""Arrow endpoint decorations for edges."""

from dataclasses import dataclass
from enum import Enum


class Fill(str, Enum):
    """Whether an arrow shape is drawn open or filled."""
    OPEN = "o"
    FILLED = ""


class Side(str, Enum):
    """Which half of an arrow shape is drawn."""
    LEFT = "l"
    RIGHT = "r"
    BOTH = ""


class ShapeName(str, Enum):
    """Primitive arrow shapes known to Graphviz."""
    NONE = "none"
    NORMAL = "normal"
    BOX = "box"
    CROW = "crow"
    CURVE = "curve"
    ICURVE = "icurve"
    DIAMOND = "diamond"
    DOT = "dot"
    INV = "inv"
    TEE = "tee"
    VEE = "vee"


# (carries fill, carries side) per shape
_MODIFIERS = {
    ShapeName.NONE: (False, False),
    ShapeName.NORMAL: (True, True),
    ShapeName.BOX: (True, True),
    ShapeName.CROW: (False, True),
    ShapeName.CURVE: (False, True),
    ShapeName.ICURVE: (True, True),
    ShapeName.DIAMOND: (True, True),
    ShapeName.DOT: (True, False),
    ShapeName.INV: (True, True),
    ShapeName.TEE: (False, True),
    ShapeName.VEE: (False, True),
}


@dataclass(frozen=True)
class ArrowShape:
    """One primitive arrow shape with its fill and side modifiers.

    Use the named constructors (``ArrowShape.crow(Side.LEFT)``,
    ``ArrowShape.diamond(Fill.OPEN)``...) rather than building one directly.
    """
    name: ShapeName
    fill: Fill | None = None
    side: Side | None = None

    def __post_init__(self) -> None:
        has_fill, has_side = _MODIFIERS[self.name]
        if (self.fill is not None) != has_fill:
            state = "requires" if has_fill else "does not take"
            raise ValueError(f"Arrow shape '{self.name.value}' {state} a fill")
        if (self.side is not None) != has_side:
            state = "requires" if has_side else "does not take"
            raise ValueError(f"Arrow shape '{self.name.value}' {state} a side")

    @classmethod
    def none(cls) -> "ArrowShape":
        return cls(ShapeName.NONE)

    @classmethod
    def normal(cls, fill: Fill = Fill.FILLED, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.NORMAL, fill, side)

    @classmethod
    def boxed(cls, fill: Fill = Fill.FILLED, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.BOX, fill, side)

    @classmethod
    def crow(cls, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.CROW, side=side)

    @classmethod
    def curve(cls, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.CURVE, side=side)

    @classmethod
    def icurve(cls, fill: Fill = Fill.FILLED, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.ICURVE, fill, side)

    @classmethod
    def diamond(cls, fill: Fill = Fill.FILLED, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.DIAMOND, fill, side)

    @classmethod
    def dot(cls, fill: Fill = Fill.FILLED) -> "ArrowShape":
        return cls(ShapeName.DOT, fill=fill)

    @classmethod
    def inv(cls, fill: Fill = Fill.FILLED, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.INV, fill, side)

    @classmethod
    def tee(cls, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.TEE, side=side)

    @classmethod
    def vee(cls, side: Side = Side.BOTH) -> "ArrowShape":
        return cls(ShapeName.VEE, side=side)

    def to_dot_string(self) -> str:
        """Render as a Graphviz arrow name, e.g. ``olnormal`` or ``rcrow``."""
        prefix = ""
        if self.fill is not None:
            prefix += self.fill.value
        if self.side is not None and self.side != Side.BOTH:
            prefix += self.side.value
        return prefix + self.name.value


@dataclass(frozen=True)
class Arrow:
    """Decoration of one edge end: a sequence of shapes.

    An empty sequence keeps the Graphviz default and emits nothing.
    """
    shapes: tuple[ArrowShape, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable of shapes and store it as a tuple
        object.__setattr__(self, "shapes", tuple(self.shapes))

    @classmethod
    def default(cls) -> "Arrow":
        return cls()

    @classmethod
    def none(cls) -> "Arrow":
        """Explicitly request no arrowhead."""
        return cls((ArrowShape.none(),))

    @classmethod
    def normal(cls) -> "Arrow":
        return cls((ArrowShape.normal(),))

    @classmethod
    def from_arrow(cls, shape: ArrowShape) -> "Arrow":
        return cls((shape,))

    @classmethod
    def of(cls, *shapes: ArrowShape) -> "Arrow":
        """Combine several shapes into one arrow, e.g. ``Arrow.of(tee, normal)``."""
        return cls(shapes)

    def is_default(self) -> bool:
        return not self.shapes

    def to_dot_string(self) -> str:
        return "".join(shape.to_dot_string() for shape in self.shapes)
