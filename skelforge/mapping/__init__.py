from .schema import (
    SHAPES,
    LAYOUTS,
    SKIP_CLASS_NAME,
    RuleMatch,
    RuleTarget,
    MappingRule,
    SkeletonPrimitive,
    SkeletonSpec,
    rule,
)
from .directives import DIRECTIVE_ATTRIBUTE, SKIP, parse_directive
from .rules import default_rules, AVATAR_RULES, BADGE_RULES, HEADING_RULES, PARAGRAPH_RULES
from .rules_schema import coerce_rule, load_rules
from .engine import (
    RuleSet,
    KeyFactory,
    Classification,
    merge_rules,
    matches,
    calculate_text_lines,
    classify,
    classify_node,
)

__all__ = [
    "SHAPES",
    "LAYOUTS",
    "SKIP_CLASS_NAME",
    "RuleMatch",
    "RuleTarget",
    "MappingRule",
    "SkeletonPrimitive",
    "SkeletonSpec",
    "rule",
    "DIRECTIVE_ATTRIBUTE",
    "SKIP",
    "parse_directive",
    "default_rules",
    "AVATAR_RULES",
    "BADGE_RULES",
    "HEADING_RULES",
    "PARAGRAPH_RULES",
    "coerce_rule",
    "load_rules",
    "RuleSet",
    "KeyFactory",
    "Classification",
    "merge_rules",
    "matches",
    "calculate_text_lines",
    "classify",
    "classify_node",
]
