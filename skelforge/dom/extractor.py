import logging
from typing import Any, Callable, Dict, Optional

from .heuristics import DEFAULT_POLICY, GeometryPolicy
from .node import VisualNode
from .primitives import (
    DEFAULT_DISPLAY,
    DEFAULT_FONT_SIZE,
    DEFAULT_POSITION,
    Box,
    ElementMetadata,
    StyleFacts,
)

logger = logging.getLogger(__name__)


def _guarded(what: str, fn: Callable[[], Any], default: Any) -> Any:
    try:
        return fn()
    except Exception as exc:
        logger.warning("Failed to read %s: %s", what, exc)
        return default


def _kind_of(node: VisualNode) -> str:
    tag = _guarded("tag name", node.tag_name, "div")
    return str(tag or "div").lower()


def measure(node: VisualNode, index: int = 0, policy: Optional[GeometryPolicy] = None) -> Box:
    """
    Box for `node`: measured when a live surface exists, synthesized otherwise.
    A failed measurement yields a zero box.
    """
    policy = policy or DEFAULT_POLICY
    live = _guarded("measurement surface", node.is_measurable, False)
    if not live:
        kind = _kind_of(node)
        text = _guarded("text content", lambda: (node.text_content() or "").strip(), "")
        return policy.synthesize_box(kind, text, index)

    def read_box() -> Box:
        rect = node.bounding_box()
        return Box.from_dict(rect)

    return _guarded("bounding box", read_box, Box.zero())


def _style_facts(node: VisualNode, policy: GeometryPolicy, kind: str, live: bool) -> StyleFacts:
    if not live:
        return policy.synthesize_style(kind)
    computed: Dict[str, str] = _guarded("computed style", node.computed_style, {}) or {}
    return StyleFacts(
        display=computed.get("display") or DEFAULT_DISPLAY,
        position=computed.get("position") or DEFAULT_POSITION,
        font_size=computed.get("fontSize") or computed.get("font-size") or DEFAULT_FONT_SIZE,
    )


def _attributes(node: VisualNode) -> Dict[str, str]:
    def read() -> Dict[str, str]:
        return {str(name): str(value) for name, value in node.attributes()}

    return _guarded("attributes", read, {})


def extract(
    node: VisualNode,
    index: int = 0,
    policy: Optional[GeometryPolicy] = None,
    box: Optional[Box] = None,
) -> ElementMetadata:
    """
    Snapshot one node. Each fact is read independently; a failure logs a
    warning and substitutes that fact's default, so e.g. a broken measurement
    does not blank out text or attributes.

    `box` may be passed when the caller already measured the node.
    """
    policy = policy or DEFAULT_POLICY
    kind = _kind_of(node)
    class_tokens = _guarded("class name", lambda: str(node.class_name() or ""), "")
    text = _guarded("text content", lambda: (node.text_content() or "").strip(), "")
    live = _guarded("measurement surface", node.is_measurable, False)
    if box is None:
        box = measure(node, index, policy)

    return ElementMetadata(
        kind=kind,
        class_tokens=class_tokens,
        text=text,
        box=box,
        style=_style_facts(node, policy, kind, live),
        attributes=_attributes(node),
        children=[],
    )
