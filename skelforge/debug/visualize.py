from typing import Optional, Sequence, Tuple
import os

import cv2  # type: ignore
import numpy as np

from ..dom.primitives import ElementMetadata
from ..mapping.engine import KeyFactory, RulesArg, as_rule_set, classify_node


def _shape_color(shape: str, source: str) -> Tuple[int, int, int]:
    """
    BGR colors for visibility on most screenshots.
    """
    if source == "skip":
        return (160, 160, 160)  # grey
    if source == "fallback":
        return (0, 220, 220)  # yellow
    mapping = {
        "rect": (0, 200, 0),  # green
        "circle": (200, 120, 0),  # blue-ish
        "line": (0, 0, 220),  # red
    }
    return mapping.get(shape, (0, 220, 220))


def _canvas_size(tree: Sequence[ElementMetadata], margin: int = 20) -> Tuple[int, int]:
    width, height = 320, 240
    for root in tree:
        for meta in root.iter_tree():
            b = meta.box
            try:
                width = max(width, int(b.x + b.width) + margin)
                height = max(height, int(b.y + b.height) + margin)
            except (TypeError, ValueError, OverflowError):
                continue
    return width, height


def _corners(meta: ElementMetadata):
    b = meta.box
    x1, y1 = int(b.x), int(b.y)
    return (x1, y1), (x1 + int(b.width), y1 + int(b.height))


def draw_metadata(
    tree: Sequence[ElementMetadata],
    output_path: str,
    image_path: Optional[str] = None,
    rules: RulesArg = None,
) -> str:
    """
    Overlay scanned boxes, colored by the primitive each node classifies to,
    on a screenshot (or a blank canvas) and write the image to output_path.
    """
    if image_path:
        img = cv2.imread(image_path)
        if img is None:
            raise ValueError(f"Cannot read image: {image_path}")
    else:
        width, height = _canvas_size(tree)
        img = np.full((height, width, 3), 255, dtype=np.uint8)

    rule_set = as_rule_set(rules)
    keys = KeyFactory()
    for root in tree:
        for meta in root.iter_tree():
            result = classify_node(meta, rule_set, keys)
            try:
                top_left, bottom_right = _corners(meta)
            except (TypeError, ValueError, OverflowError):
                # NaN or infinite geometry cannot be drawn
                continue
            color = _shape_color(result.primitive.shape, result.source)
            cv2.rectangle(img, top_left, bottom_right, color, 2)
            label = f"{meta.kind}:{result.primitive.shape}"
            if result.primitive.lines:
                label += f" x{result.primitive.lines}"
            cv2.putText(
                img,
                label,
                (top_left[0], max(0, top_left[1] - 6)),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.5,
                color,
                1,
                lineType=cv2.LINE_AA,
            )

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    cv2.imwrite(output_path, img)
    return output_path
