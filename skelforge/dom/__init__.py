from .primitives import Box, StyleFacts, ElementMetadata
from .node import VisualNode, Element, h
from .heuristics import GeometryPolicy, DEFAULT_POLICY
from .extractor import extract, measure
from .scanner import ScanBudget, scan
from .html import parse_html, element_from_snapshot, SNAPSHOT_JS

__all__ = [
    "Box",
    "StyleFacts",
    "ElementMetadata",
    "VisualNode",
    "Element",
    "h",
    "GeometryPolicy",
    "DEFAULT_POLICY",
    "extract",
    "measure",
    "ScanBudget",
    "scan",
    "parse_html",
    "element_from_snapshot",
    "SNAPSHOT_JS",
]
