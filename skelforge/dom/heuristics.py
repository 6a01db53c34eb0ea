"""Heuristic geometry for nodes rendered without a measurement surface."""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .primitives import Box, ElementMetadata, StyleFacts

Dimension = Union[int, float, str]

HEADING_KINDS = ("h1", "h2", "h3", "h4", "h5", "h6")
TEXT_KINDS = ("p", "span", "div") + HEADING_KINDS

FALLBACK_DIMENSIONS: Dict[str, Tuple[str, str]] = {
    "h1": ("80%", "2rem"),
    "h2": ("70%", "1.75rem"),
    "h3": ("60%", "1.5rem"),
    "h4": ("50%", "1.25rem"),
    "h5": ("45%", "1.125rem"),
    "h6": ("40%", "1rem"),
    "p": ("100%", "1.25rem"),
    "span": ("4rem", "1rem"),
    "button": ("6rem", "2.5rem"),
    "input": ("12rem", "2.5rem"),
    "select": ("10rem", "2.5rem"),
    "textarea": ("100%", "6rem"),
    "img": ("8rem", "6rem"),
    "video": ("16rem", "9rem"),
    "canvas": ("12rem", "8rem"),
    "svg": ("2rem", "2rem"),
    "div": ("100%", "2rem"),
    "section": ("100%", "4rem"),
    "article": ("100%", "8rem"),
    "aside": ("16rem", "12rem"),
    "nav": ("100%", "3rem"),
    "header": ("100%", "4rem"),
    "footer": ("100%", "3rem"),
    "ul": ("100%", "6rem"),
    "ol": ("100%", "6rem"),
    "li": ("100%", "1.5rem"),
    "table": ("100%", "8rem"),
    "tr": ("100%", "2rem"),
    "td": ("6rem", "2rem"),
    "th": ("6rem", "2.5rem"),
}
DEFAULT_FALLBACK = ("8rem", "2rem")


def heading_level(kind: str) -> int:
    """Return 1..6 for h1..h6, 0 for anything else."""
    if kind in HEADING_KINDS:
        return int(kind[1])
    return 0


def parse_px(value: str, default: float = 16.0) -> float:
    """
    Leading numeric part of a CSS length ("18px" -> 18). Falls back to `default`.
    """
    digits = ""
    for ch in str(value or "").strip():
        if ch.isdigit() or (ch == "." and "." not in digits):
            digits += ch
        else:
            break
    try:
        parsed = float(digits)
    except ValueError:
        return default
    return parsed or default


@dataclass
class GeometryPolicy:
    """
    Tunable constants for synthesized geometry.

    Only monotonic scaling matters here (longer text -> wider / taller,
    higher heading level -> smaller); swap the instance to retune.
    """

    default_width: int = 100
    default_height: int = 20
    row_spacing: int = 25
    image_size: Tuple[int, int] = (200, 150)
    heading_heights: Dict[int, int] = field(
        default_factory=lambda: {1: 32, 2: 28, 3: 24, 4: 20, 5: 18, 6: 16}
    )
    heading_font_sizes: Dict[int, int] = field(
        default_factory=lambda: {1: 32, 2: 24, 3: 20, 4: 18, 5: 16, 6: 14}
    )
    heading_char_width: int = 8
    heading_min_width: int = 100
    paragraph_chars_per_row: int = 50
    paragraph_row_height: int = 20
    paragraph_char_width: int = 6
    paragraph_width_range: Tuple[int, int] = (200, 400)
    button_char_width: int = 8
    button_padding: int = 32
    button_min_width: int = 80
    button_height: int = 36
    content_width_cap: int = 600
    line_height_factor: float = 1.4
    fallback_dimensions: Dict[str, Tuple[str, str]] = field(
        default_factory=lambda: dict(FALLBACK_DIMENSIONS)
    )

    def synthesize_box(self, kind: str, text: str, index: int = 0) -> Box:
        width, height = self.default_width, self.default_height
        length = len(text or "")
        level = heading_level(kind)

        if kind == "img":
            width, height = self.image_size
        elif level:
            height = self.heading_heights.get(level, self.default_height)
            width = max(self.heading_min_width, length * self.heading_char_width)
        elif kind == "p":
            rows = math.ceil(length / self.paragraph_chars_per_row)
            height = max(self.paragraph_row_height, rows * self.paragraph_row_height)
            lo, hi = self.paragraph_width_range
            width = min(hi, max(lo, length * self.paragraph_char_width))
        elif kind == "button":
            width = max(self.button_min_width, length * self.button_char_width + self.button_padding)
            height = self.button_height

        return Box(width=width, height=height, x=0, y=index * self.row_spacing)

    def synthesize_style(self, kind: str) -> StyleFacts:
        level = heading_level(kind)
        font_size = f"{self.heading_font_sizes.get(level, 16)}px" if level else "16px"
        return StyleFacts(
            display="inline" if kind == "span" else "block",
            position="static",
            font_size=font_size,
        )

    def fallback_for(self, kind: str) -> Tuple[str, str]:
        return self.fallback_dimensions.get(kind, DEFAULT_FALLBACK)

    def content_dimensions(self, metadata: ElementMetadata) -> Tuple[Dimension, Dimension]:
        """
        Best-effort size for keeping layout space: measured box when usable,
        text-based estimate for text kinds, then the per-kind fallback table.
        """
        box = metadata.box
        if _positive(box.width) and _positive(box.height):
            return box.width, box.height

        if metadata.kind in TEXT_KINDS and metadata.text:
            font_px = parse_px(metadata.style.font_size)
            width = min(len(metadata.text) * font_px * 0.6, self.content_width_cap)
            return round(width, 2), round(font_px * self.line_height_factor, 2)

        return self.fallback_for(metadata.kind)


def _positive(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


DEFAULT_POLICY = GeometryPolicy()
