from .validator import ValidationResult, validate
from .serializer import serialize, deserialize, load_static_spec, hydrate_spec
from .generator import (
    generate,
    generate_live_spec,
    generate_static_spec,
    generate_multiple_specs,
    generate_server_safe_spec,
    spec_from_tree,
    minimal_spec,
    loading_status_attributes,
)
from .cache import SpecCache, cache_key
from .registry import SpecRegistry, predefined_specs

__all__ = [
    "ValidationResult",
    "validate",
    "serialize",
    "deserialize",
    "load_static_spec",
    "hydrate_spec",
    "generate",
    "generate_live_spec",
    "generate_static_spec",
    "generate_multiple_specs",
    "generate_server_safe_spec",
    "spec_from_tree",
    "minimal_spec",
    "loading_status_attributes",
    "SpecCache",
    "cache_key",
    "SpecRegistry",
    "predefined_specs",
]
