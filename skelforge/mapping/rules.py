"""Built-in mapping rules."""

from typing import List

from .schema import MappingRule, rule

HEADING_HEIGHTS = {
    "h1": "2rem",
    "h2": "1.5rem",
    "h3": "1.25rem",
    "h4": "1.125rem",
    "h5": "1rem",
    "h6": "0.875rem",
}


def default_rules() -> List[MappingRule]:
    """
    Fixed default table. More specific rules outrank generic ones of the
    same element kind (img.avatar over img, button over .btn).
    """
    rules = [
        rule("circle", 100, kind="img", class_contains="avatar", w="40px", h="40px"),
        rule("rect", 80, kind="button", radius="6px"),
        rule("rect", 75, class_contains="btn", radius="6px"),
    ]
    rules += [rule("line", 70, kind=k, lines=1, h=height) for k, height in HEADING_HEIGHTS.items()]
    rules += [
        # lines left unset: computed from text length and container width
        rule("line", 60, kind="p", h="1rem"),
        rule("rect", 50, kind="svg"),
        rule("rect", 40, kind="img"),
        rule("rect", 40, kind="video"),
        rule("rect", 40, kind="audio", h="40px"),
        rule("rect", 65, class_contains="tag", h="24px", radius="12px"),
        rule("rect", 65, class_contains="badge", h="20px", radius="10px"),
    ]
    return rules


# Opt-in rule packs; pass any of these as custom rules.

AVATAR_RULES: List[MappingRule] = [
    rule("circle", 100, kind="img", class_contains="avatar", w="40px", h="40px"),
    rule("circle", 95, kind="img", class_contains="profile", w="48px", h="48px"),
    rule("circle", 90, kind="img", class_contains="user", w="32px", h="32px"),
]

BADGE_RULES: List[MappingRule] = [
    rule("rect", 65, class_contains="tag", h="24px", radius="12px"),
    rule("rect", 65, class_contains="badge", h="20px", radius="10px"),
    rule("rect", 67, class_contains="chip", h="32px", radius="16px"),
    rule("rect", 63, class_contains="label", h="22px", radius="4px"),
    rule("circle", 68, class_contains="status", w="12px", h="12px"),
    rule("circle", 66, class_contains="notification", w="16px", h="16px"),
]

HEADING_RULES: List[MappingRule] = [
    rule("line", 70, kind=k, lines=1, h=height) for k, height in HEADING_HEIGHTS.items()
] + [
    rule("line", 65, class_contains="title", lines=1, h="1.5rem"),
    rule("line", 65, class_contains="subtitle", lines=1, h="1.125rem"),
]

PARAGRAPH_RULES: List[MappingRule] = [
    rule("line", 60, kind="p", h="1rem"),
    rule("line", 55, class_contains="text", lines=2, h="1rem"),
    rule("line", 58, class_contains="description", lines=3, h="0.875rem"),
    rule("line", 58, class_contains="caption", lines=1, h="0.75rem"),
    rule("line", 62, class_contains="lead", lines=2, h="1.125rem"),
]
