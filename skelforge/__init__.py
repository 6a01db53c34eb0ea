from .config import SkelforgeConfig, configure_logging
from .dom import Element, ElementMetadata, VisualNode, h, parse_html, scan
from .errors import (
    CacheImportError,
    ContextClosedError,
    SkelforgeError,
    SpecFormatError,
    SpecGenerationError,
    SpecSerializationError,
    SpecValidationError,
)
from .mapping import MappingRule, SkeletonPrimitive, SkeletonSpec, classify, default_rules, rule
from .pipeline import SkeletonContext
from .spec import (
    SpecCache,
    SpecRegistry,
    deserialize,
    generate,
    generate_live_spec,
    generate_static_spec,
    serialize,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "SkelforgeConfig",
    "configure_logging",
    "Element",
    "ElementMetadata",
    "VisualNode",
    "h",
    "parse_html",
    "scan",
    "CacheImportError",
    "ContextClosedError",
    "SkelforgeError",
    "SpecFormatError",
    "SpecGenerationError",
    "SpecSerializationError",
    "SpecValidationError",
    "MappingRule",
    "SkeletonPrimitive",
    "SkeletonSpec",
    "classify",
    "default_rules",
    "rule",
    "SkeletonContext",
    "SpecCache",
    "SpecRegistry",
    "deserialize",
    "generate",
    "generate_live_spec",
    "generate_static_spec",
    "serialize",
    "validate",
]
