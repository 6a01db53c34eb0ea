from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


class VisualNode:
    """
    Host adapter interface for one node of a visual tree.

    Any method may raise; the extractor guards each call separately.
    """

    def tag_name(self) -> str:
        raise NotImplementedError("Subclasses must implement tag_name().")

    def class_name(self) -> str:
        return ""

    def text_content(self) -> str:
        return ""

    def is_measurable(self) -> bool:
        """
        False when there is no live measurement surface (server or build time).
        The extractor then synthesizes geometry instead of calling bounding_box().
        """
        return False

    def bounding_box(self) -> Dict[str, float]:
        """
        Return {"width", "height", "x", "y"}. Zero, NaN and negative values are allowed.
        """
        raise NotImplementedError("Subclasses must implement bounding_box().")

    def computed_style(self) -> Dict[str, str]:
        return {}

    def attributes(self) -> Iterable[Tuple[str, str]]:
        return []

    def element_children(self) -> List["VisualNode"]:
        return []


Child = Union["Element", str]


class Element(VisualNode):
    """
    In-memory visual node.

    Without a `box` the element behaves like a server-side node: it is not
    measurable and gets heuristic geometry. With a `box` it behaves like a
    live, rendered node.
    """

    def __init__(
        self,
        kind: str,
        attrs: Optional[Dict[str, Any]] = None,
        children: Optional[List[Child]] = None,
        box: Optional[Dict[str, float]] = None,
        style: Optional[Dict[str, str]] = None,
    ):
        self.kind = kind
        self.attrs = dict(attrs or {})
        self.children = list(children or [])
        self.box = box
        self.style = style

    def __repr__(self) -> str:
        return f"Element({self.kind!r}, attrs={self.attrs!r}, children={len(self.children)})"

    def tag_name(self) -> str:
        return self.kind

    def class_name(self) -> str:
        value = self.attrs.get("class", self.attrs.get("className", ""))
        if isinstance(value, (list, tuple)):
            return " ".join(str(v) for v in value)
        return str(value or "")

    def own_text(self) -> str:
        return " ".join(c for c in self.children if isinstance(c, str))

    def text_content(self) -> str:
        parts: List[str] = []
        for c in self.children:
            if isinstance(c, str):
                parts.append(c)
            else:
                parts.append(c.text_content())
        return " ".join(p for p in parts if p)

    def is_measurable(self) -> bool:
        return self.box is not None

    def bounding_box(self) -> Dict[str, float]:
        if self.box is None:
            raise RuntimeError(f"<{self.kind}> has no measurement surface")
        return self.box

    def computed_style(self) -> Dict[str, str]:
        return dict(self.style or {})

    def attributes(self) -> Iterable[Tuple[str, str]]:
        out: List[Tuple[str, str]] = []
        for name, value in self.attrs.items():
            if name == "className":
                name = "class"
            if isinstance(value, (list, tuple)):
                value = " ".join(str(v) for v in value)
            if isinstance(value, (str, int, float)) and not isinstance(value, bool):
                out.append((name, str(value)))
        return out

    def element_children(self) -> List["Element"]:
        return [c for c in self.children if isinstance(c, Element)]

    def iter_elements(self):
        yield self
        for c in self.element_children():
            yield from c.iter_elements()


def h(kind: str, attrs: Optional[Dict[str, Any]] = None, *children: Child, **kwargs) -> Element:
    """
    Shorthand element factory: h("p", {"class": "lead"}, "Hello").
    Extra keyword arguments (box, style) go straight to Element.
    """
    return Element(kind, attrs, list(children), **kwargs)
