# skelforge/dom/primitives.py

import math
from typing import Any, Dict, List, Optional

DEFAULT_DISPLAY = "block"
DEFAULT_POSITION = "static"
DEFAULT_FONT_SIZE = "16px"


def _round_finite(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
        return int(round(value))
    return value


class Box:
    """
    Measured or synthesized geometry of one node.
    Degenerate values (NaN, inf, negative) are kept as-is.
    """

    def __init__(self, width: float = 0, height: float = 0, x: float = 0, y: float = 0):
        self.width = _round_finite(width)
        self.height = _round_finite(height)
        self.x = _round_finite(x)
        self.y = _round_finite(y)

    @classmethod
    def zero(cls) -> "Box":
        return cls(0, 0, 0, 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Box":
        return cls(
            width=data.get("width", 0),
            height=data.get("height", 0),
            x=data.get("x", 0),
            y=data.get("y", 0),
        )

    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height, "x": self.x, "y": self.y}


class StyleFacts:
    """
    The few computed-style facts the classifier looks at.
    """

    def __init__(
        self,
        display: str = DEFAULT_DISPLAY,
        position: str = DEFAULT_POSITION,
        font_size: str = DEFAULT_FONT_SIZE,
    ):
        self.display = display
        self.position = position
        self.font_size = font_size

    def to_dict(self) -> Dict[str, Any]:
        return {"display": self.display, "position": self.position, "fontSize": self.font_size}


class ElementMetadata:
    """
    Structural snapshot of a single visual node.
    `children` is filled in by the scanner, never by the extractor.
    """

    def __init__(
        self,
        kind: str,
        class_tokens: str = "",
        text: str = "",
        box: Optional[Box] = None,
        style: Optional[StyleFacts] = None,
        attributes: Optional[Dict[str, str]] = None,
        children: Optional[List["ElementMetadata"]] = None,
    ):
        self.kind = kind  # lower-cased tag, e.g. "h1"
        self.class_tokens = class_tokens  # raw class string
        self.text = text  # trimmed text content
        self.box = box or Box.zero()
        self.style = style or StyleFacts()
        self.attributes = attributes or {}
        self.children = children or []

    def iter_tree(self):
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def count(self) -> int:
        return sum(1 for _ in self.iter_tree())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "classTokens": self.class_tokens,
            "text": self.text,
            "box": self.box.to_dict(),
            "style": self.style.to_dict(),
            "attributes": dict(self.attributes),
            "children": [c.to_dict() for c in self.children],
        }
