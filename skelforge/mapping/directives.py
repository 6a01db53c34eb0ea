"""
Per-node directives, read from the `data-skeleton` attribute:

    skip                    omit the node
    rect | circle | line    force a shape
    circle:40px             circle, size applied to both axes
    rect:100x50             explicit width x height
    line:80%                width only
    {"shape": "rect", "width": "100%", "radius": "8px", ...}
"""

import json
import logging
import re
from typing import Any, Dict, Optional, Union

from .schema import SHAPES

logger = logging.getLogger(__name__)

DIRECTIVE_ATTRIBUTE = "data-skeleton"
SKIP = "skip"

_SIZE_PAIR = re.compile(r"^\d+x\d+")

Directive = Union[str, Dict[str, Any]]


def _from_json(value: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(value)
    except ValueError as exc:
        logger.warning("Ignoring malformed skeleton directive %r: %s", value, exc)
        return None
    if not isinstance(parsed, dict):
        logger.warning("Ignoring skeleton directive %r: expected an object", value)
        return None

    shape = parsed.get("shape") or "rect"
    if shape not in SHAPES:
        logger.warning("Ignoring skeleton directive %r: unknown shape %r", value, shape)
        return None
    override: Dict[str, Any] = {"shape": shape}
    for key in ("width", "height", "lines", "style", "className"):
        if parsed.get(key) is not None:
            override[key] = parsed[key]
    radius = parsed.get("borderRadius") or parsed.get("radius")
    if radius is not None:
        override["borderRadius"] = radius
    return override


def parse_directive(value: Optional[str]) -> Optional[Directive]:
    """
    Returns SKIP, an override dict (transport keys), or None for "no override".
    Never raises: malformed input logs a warning and returns None.
    """
    if value is None:
        return None
    raw = str(value).strip()
    if not raw:
        return None
    if raw.lower() == SKIP:
        return SKIP
    if raw.startswith("{"):
        return _from_json(raw)

    lowered = raw.lower()
    if lowered in SHAPES:
        return {"shape": lowered}

    shape, _, size = lowered.partition(":")
    if shape not in SHAPES or not size:
        logger.warning("Ignoring malformed skeleton directive %r", value)
        return None

    override: Dict[str, Any] = {"shape": shape}
    if shape == "circle":
        override["width"] = size
        override["height"] = size
    elif _SIZE_PAIR.match(size):
        width, height = size.split("x")[:2]
        override["width"] = width
        override["height"] = height
    else:
        override["width"] = size
    return override
