from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

SHAPES = ("rect", "circle", "line")
LAYOUTS = ("stack", "row", "grid")
SKIP_CLASS_NAME = "__skeleton-skip__"

Dimension = Union[int, float, str]


@dataclass
class RuleMatch:
    kind: Optional[str] = None
    class_contains: Optional[str] = None
    role: Optional[str] = None
    attr: Optional[Dict[str, str]] = None


@dataclass
class RuleTarget:
    shape: str
    width: Optional[str] = None
    height: Optional[str] = None
    lines: Optional[int] = None
    radius: Optional[str] = None


@dataclass
class MappingRule:
    match: RuleMatch
    to: RuleTarget
    priority: float

    def to_dict(self) -> Dict[str, Any]:
        match: Dict[str, Any] = {}
        if self.match.kind is not None:
            match["kind"] = self.match.kind
        if self.match.class_contains is not None:
            match["classContains"] = self.match.class_contains
        if self.match.role is not None:
            match["role"] = self.match.role
        if self.match.attr is not None:
            match["attr"] = dict(self.match.attr)
        to: Dict[str, Any] = {"shape": self.to.shape}
        size = {k: v for k, v in (("w", self.to.width), ("h", self.to.height)) if v is not None}
        if size:
            to["size"] = size
        if self.to.lines is not None:
            to["lines"] = self.to.lines
        if self.to.radius is not None:
            to["radius"] = self.to.radius
        return {"match": match, "to": to, "priority": self.priority}


def rule(
    shape: str,
    priority: float,
    *,
    kind: Optional[str] = None,
    class_contains: Optional[str] = None,
    role: Optional[str] = None,
    attr: Optional[Dict[str, str]] = None,
    w: Optional[str] = None,
    h: Optional[str] = None,
    lines: Optional[int] = None,
    radius: Optional[str] = None,
) -> MappingRule:
    """Compact MappingRule constructor."""
    return MappingRule(
        match=RuleMatch(kind=kind, class_contains=class_contains, role=role, attr=attr),
        to=RuleTarget(shape=shape, width=w, height=h, lines=lines, radius=radius),
        priority=priority,
    )


# (python attribute, transport key)
_PRIMITIVE_FIELDS = (
    ("key", "key"),
    ("shape", "shape"),
    ("width", "width"),
    ("height", "height"),
    ("border_radius", "borderRadius"),
    ("lines", "lines"),
    ("style", "style"),
    ("class_name", "className"),
)


@dataclass
class SkeletonPrimitive:
    key: str
    shape: str
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None
    border_radius: Optional[str] = None
    lines: Optional[int] = None
    style: Optional[Dict[str, Any]] = None
    class_name: Optional[str] = None

    @property
    def is_skip(self) -> bool:
        return self.class_name == SKIP_CLASS_NAME

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, key in _PRIMITIVE_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                out[key] = dict(value) if isinstance(value, dict) else value
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkeletonPrimitive":
        kwargs = {attr: data.get(key) for attr, key in _PRIMITIVE_FIELDS}
        return cls(**kwargs)


@dataclass
class SkeletonSpec:
    children: List[SkeletonPrimitive] = field(default_factory=list)
    root_key: Optional[str] = None
    layout: Optional[str] = None
    gap: Optional[Dimension] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.root_key is not None:
            out["rootKey"] = self.root_key
        out["children"] = [c.to_dict() for c in self.children]
        if self.layout is not None:
            out["layout"] = self.layout
        if self.gap is not None:
            out["gap"] = self.gap
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkeletonSpec":
        return cls(
            children=[SkeletonPrimitive.from_dict(c) for c in data.get("children", [])],
            root_key=data.get("rootKey"),
            layout=data.get("layout"),
            gap=data.get("gap"),
        )
