"""Named, pre-built skeleton specs for common components."""

import json
import logging
from typing import Any, Dict, List, Optional

from ..errors import CacheImportError
from ..mapping.schema import SkeletonPrimitive, SkeletonSpec
from .validator import validate

logger = logging.getLogger(__name__)

DEFAULT_SPEC_NAME = "ProductCard"


def _p(key: str, shape: str, width: str, height: str, lines: Optional[int] = None, **style: str) -> SkeletonPrimitive:
    return SkeletonPrimitive(key=key, shape=shape, width=width, height=height, lines=lines, style=style or None)


def predefined_specs() -> Dict[str, SkeletonSpec]:
    return {
        "ProductCard": SkeletonSpec(
            children=[
                _p("product-image", "rect", "100%", "200px", marginBottom="16px", borderRadius="8px"),
                _p("product-title", "line", "80%", "1.5rem", marginBottom="8px"),
                _p("product-description", "line", "100%", "1rem", lines=2, marginBottom="12px"),
                _p("product-price", "line", "40%", "1.25rem", marginBottom="16px"),
                _p("product-button", "rect", "120px", "40px", borderRadius="6px"),
            ],
            layout="stack",
        ),
        "UserProfile": SkeletonSpec(
            children=[
                _p("profile-header", "rect", "100%", "120px", marginBottom="16px", borderRadius="8px"),
                _p("profile-avatar", "circle", "80px", "80px", marginBottom="12px"),
                _p("profile-name", "line", "60%", "1.5rem", marginBottom="8px"),
                _p("profile-email", "line", "80%", "1rem", marginBottom="16px"),
                _p("profile-stats", "rect", "100%", "60px", borderRadius="6px"),
            ],
            layout="stack",
        ),
        "DashboardCard": SkeletonSpec(
            children=[
                _p("card-header", "line", "50%", "1.25rem", marginBottom="16px"),
                _p("card-metric", "line", "30%", "2rem", marginBottom="8px"),
                _p("card-change", "line", "40%", "1rem", marginBottom="16px"),
                _p("card-chart", "rect", "100%", "80px", borderRadius="4px"),
            ],
            layout="stack",
        ),
        "ListItem": SkeletonSpec(
            children=[
                _p("item-avatar", "circle", "40px", "40px", marginRight="12px"),
                _p("item-content", "rect", "100%", "40px", borderRadius="4px"),
            ],
            layout="row",
            gap="12px",
        ),
        "Form": SkeletonSpec(
            children=[
                _p("form-title", "line", "40%", "1.5rem", marginBottom="24px"),
                _p("form-field-1", "rect", "100%", "40px", marginBottom="16px", borderRadius="4px"),
                _p("form-field-2", "rect", "100%", "40px", marginBottom="16px", borderRadius="4px"),
                _p("form-field-3", "rect", "100%", "80px", marginBottom="24px", borderRadius="4px"),
                _p("form-submit", "rect", "120px", "40px", borderRadius="6px"),
            ],
            layout="stack",
        ),
        "TableRow": SkeletonSpec(
            children=[
                _p("col-1", "line", "20%", "1rem"),
                _p("col-2", "line", "30%", "1rem"),
                _p("col-3", "line", "25%", "1rem"),
                _p("col-4", "rect", "80px", "32px", borderRadius="4px"),
            ],
            layout="row",
            gap="16px",
        ),
    }


# element type -> (shape, default width, default height, default style)
_ELEMENT_DEFAULTS = {
    "text": ("line", "80%", "1rem", None),
    "image": ("rect", "100px", "100px", None),
    "button": ("rect", "120px", "40px", {"borderRadius": "6px"}),
    "input": ("rect", "100%", "40px", {"borderRadius": "4px"}),
    "container": ("rect", "100%", "60px", None),
}


class SpecRegistry:
    """
    Named specs. Create one per application context; nothing here is global.
    """

    def __init__(self, specs: Optional[Dict[str, SkeletonSpec]] = None):
        self._specs: Dict[str, SkeletonSpec] = dict(specs or {})

    @classmethod
    def with_defaults(cls) -> "SpecRegistry":
        return cls(predefined_specs())

    def register(self, name: str, spec: SkeletonSpec) -> None:
        self._specs[name] = spec

    def get(self, name: str) -> Optional[SkeletonSpec]:
        return self._specs.get(name)

    def get_all(self) -> Dict[str, SkeletonSpec]:
        return dict(self._specs)

    def names(self) -> List[str]:
        return list(self._specs)

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def clear(self) -> None:
        self._specs.clear()

    def resolve(self, name: str, default: str = DEFAULT_SPEC_NAME) -> Optional[SkeletonSpec]:
        """Spec by name, falling back to `default` (logged) when unknown."""
        spec = self._specs.get(name)
        if spec is None:
            logger.warning("Skeleton spec %r not found, using %r", name, default)
            spec = self._specs.get(default)
        return spec

    def export_specs(self) -> str:
        return json.dumps({name: spec.to_dict() for name, spec in self._specs.items()}, indent=2)

    def import_specs(self, text: str) -> int:
        """
        Merge specs from export_specs() output. Invalid specs are logged and
        skipped; a malformed document raises CacheImportError.
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise CacheImportError(f"Failed to import skeleton specs: {exc}") from exc
        if not isinstance(data, dict):
            raise CacheImportError("Failed to import skeleton specs: expected a JSON object")

        imported = 0
        for name, raw in data.items():
            result = validate(raw)
            if not result.is_valid:
                logger.warning("Skipping skeleton spec %r: %s", name, "; ".join(result.errors))
                continue
            self._specs[name] = SkeletonSpec.from_dict(raw)
            imported += 1
        return imported

    def create_skeleton_spec(
        self,
        name: str,
        children: List[SkeletonPrimitive],
        layout: str = "stack",
        gap: Optional[str] = None,
    ) -> SkeletonSpec:
        spec = SkeletonSpec(children=list(children), layout=layout, gap=gap)
        self.register(name, spec)
        return spec

    def generate_component_spec(self, name: str, elements: List[Dict[str, Any]]) -> SkeletonSpec:
        """
        Spec from a coarse description, e.g.
        [{"type": "image", "height": "200px"}, {"type": "text", "lines": 2}].
        Unknown types are treated as containers.
        """
        children: List[SkeletonPrimitive] = []
        for index, element in enumerate(elements):
            kind = element.get("type", "container")
            shape, width, height, style = _ELEMENT_DEFAULTS.get(kind, _ELEMENT_DEFAULTS["container"])
            children.append(
                SkeletonPrimitive(
                    key=f"{name}-{kind}-{index}",
                    shape=shape,
                    width=element.get("width") or width,
                    height=element.get("height") or height,
                    lines=(element.get("lines") or 1) if kind == "text" else None,
                    style=dict(style) if style else None,
                )
            )
        spec = SkeletonSpec(children=children, layout="stack")
        self.register(name, spec)
        return spec
