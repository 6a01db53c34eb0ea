from dataclasses import dataclass, field
from typing import Any, List, Set

from ..mapping.schema import LAYOUTS, SHAPES, SkeletonSpec


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.is_valid


def _valid_lines(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value >= 1


def validate(spec: Any) -> ValidationResult:
    """
    Structural check of a specification (SkeletonSpec or decoded JSON).
    Every violation is reported; nothing is raised.
    """
    if isinstance(spec, SkeletonSpec):
        spec = spec.to_dict()

    errors: List[str] = []
    if spec is None:
        return ValidationResult(False, ["Skeleton specification is required"])
    if not isinstance(spec, dict):
        return ValidationResult(False, [f"Skeleton specification must be an object, got {type(spec).__name__}"])

    layout = spec.get("layout")
    if layout is not None and layout not in LAYOUTS:
        errors.append(f"Invalid layout: {layout!r}")

    children = spec.get("children")
    if not isinstance(children, list):
        errors.append("Skeleton specification must have a children array")
        return ValidationResult(False, errors)

    seen: Set[Any] = set()
    reported: Set[Any] = set()
    for i, child in enumerate(children):
        if not isinstance(child, dict):
            errors.append(f"Child at index {i} must be an object")
            continue

        key = child.get("key")
        if not key:
            errors.append(f"Child at index {i} is missing required 'key' property")
        elif not isinstance(key, str):
            errors.append(f"Child at index {i} has non-string key: {key!r}")
        elif key in seen:
            if key not in reported:
                errors.append(f"Duplicate keys found: {key}")
                reported.add(key)
        else:
            seen.add(key)

        shape = child.get("shape")
        if not shape:
            errors.append(f"Child at index {i} is missing required 'shape' property")
        elif shape not in SHAPES:
            errors.append(f"Child at index {i} has invalid shape: {shape}")

        if shape == "line" and child.get("lines") is not None and not _valid_lines(child["lines"]):
            errors.append(f"Child at index {i} has invalid lines value: {child['lines']!r}")

    return ValidationResult(not errors, errors)
