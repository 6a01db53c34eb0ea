import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from ..dom.heuristics import parse_px
from ..dom.primitives import ElementMetadata
from .directives import DIRECTIVE_ATTRIBUTE, SKIP, parse_directive
from .rules import default_rules
from .rules_schema import coerce_rule
from .schema import SKIP_CLASS_NAME, MappingRule, SkeletonPrimitive

logger = logging.getLogger(__name__)

AVG_CHAR_WIDTH_FACTOR = 0.6
MAX_TEXT_LINES = 10
PARAGRAPH_KINDS = ("p",)


class RuleSet:
    """
    Validated rules sorted by priority, highest first. The sort is stable,
    so on equal priority earlier rules (custom before defaults) win.
    """

    def __init__(self, rules: Iterable[MappingRule]):
        self.rules: List[MappingRule] = sorted(rules, key=lambda r: -r.priority)

    def __iter__(self) -> Iterator[MappingRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def first_match(self, metadata: ElementMetadata) -> Optional[MappingRule]:
        for candidate in self.rules:
            if matches(metadata, candidate):
                return candidate
        return None


def merge_rules(
    custom: Optional[Iterable[Union[MappingRule, dict]]] = None,
    defaults: Optional[Sequence[MappingRule]] = None,
) -> RuleSet:
    """
    Validate each custom rule on its own, drop the invalid ones (logged),
    then combine with the defaults and sort by priority.
    """
    valid: List[MappingRule] = []
    for raw in custom or []:
        parsed = coerce_rule(raw)
        if parsed is not None:
            valid.append(parsed)
    base = list(defaults) if defaults is not None else default_rules()
    return RuleSet(valid + base)


RulesArg = Union[RuleSet, Iterable[Union[MappingRule, dict]], None]


def as_rule_set(rules: RulesArg) -> RuleSet:
    if isinstance(rules, RuleSet):
        return rules
    return merge_rules(rules)


def matches(metadata: ElementMetadata, candidate: MappingRule) -> bool:
    """All present match fields must hold; absent fields are wildcards."""
    m = candidate.match
    if m.kind is not None and metadata.kind.lower() != m.kind.lower():
        return False
    if m.class_contains is not None:
        needle = m.class_contains.lower()
        if not needle or needle not in metadata.class_tokens.lower():
            return False
    if m.role is not None and metadata.attributes.get("role") != m.role:
        return False
    if m.attr:
        for name, value in m.attr.items():
            if metadata.attributes.get(name) != value:
                return False
    return True


def calculate_text_lines(
    text: str,
    container_width: float,
    font_size: str = "16px",
    max_lines: int = MAX_TEXT_LINES,
) -> int:
    """
    Estimated number of rendered lines for `text` in a container of the
    given width, clamped to [1, max_lines].
    """
    length = len((text or "").strip())
    if length == 0:
        return 1
    if not isinstance(container_width, (int, float)) or not math.isfinite(container_width):
        return 1

    char_width = parse_px(font_size) * AVG_CHAR_WIDTH_FACTOR
    chars_per_line = math.floor(container_width / char_width)
    if chars_per_line <= 0:
        return 1
    return max(1, min(math.ceil(length / chars_per_line), max_lines))


class KeyFactory:
    """
    Per-generation key source. Keys are unique within one generation and
    identical across generations over equal input.
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix
        self.counter = 0

    def next_key(self, metadata: ElementMetadata) -> str:
        classes = ".".join(metadata.class_tokens.split()) or "no-class"
        key = f"{self.prefix}{metadata.kind}-{classes}-{self.counter}"
        self.counter += 1
        return key


@dataclass
class Classification:
    primitive: SkeletonPrimitive
    source: str  # "skip" | "override" | "rule" | "fallback"
    rule: Optional[MappingRule] = None


def _axis(preferred, measured):
    if preferred:
        return preferred
    if isinstance(measured, (int, float)) and not math.isfinite(measured):
        return "auto"
    return measured or "auto"


def classify_node(
    metadata: ElementMetadata,
    rules: RulesArg = None,
    keys: Optional[KeyFactory] = None,
) -> Classification:
    keys = keys or KeyFactory()
    key = keys.next_key(metadata)
    box = metadata.box

    directive = parse_directive(metadata.attributes.get(DIRECTIVE_ATTRIBUTE))
    if directive == SKIP:
        primitive = SkeletonPrimitive(key=key, shape="rect", width=0, height=0, class_name=SKIP_CLASS_NAME)
        return Classification(primitive, "skip")

    if isinstance(directive, dict):
        primitive = SkeletonPrimitive(
            key=key,
            shape=directive.get("shape", "rect"),
            width=_axis(directive.get("width"), box.width),
            height=_axis(directive.get("height"), box.height),
            border_radius=directive.get("borderRadius"),
            lines=directive.get("lines"),
            style=directive.get("style"),
            class_name=directive.get("className"),
        )
        return Classification(primitive, "override")

    matched = as_rule_set(rules).first_match(metadata)
    if matched is None:
        primitive = SkeletonPrimitive(key=key, shape="rect", width=_axis(None, box.width), height=_axis(None, box.height))
        return Classification(primitive, "fallback")

    target = matched.to
    primitive = SkeletonPrimitive(
        key=key,
        shape=target.shape,
        width=_axis(target.width, box.width),
        height=_axis(target.height, box.height),
        border_radius=target.radius,
    )
    if target.lines:
        primitive.lines = target.lines
    elif target.shape == "line" and metadata.kind in PARAGRAPH_KINDS:
        primitive.lines = calculate_text_lines(metadata.text, box.width, metadata.style.font_size)
    return Classification(primitive, "rule", matched)


def classify(
    metadata: ElementMetadata,
    rules: RulesArg = None,
    keys: Optional[KeyFactory] = None,
) -> SkeletonPrimitive:
    """
    Map one node to a skeleton primitive.

    Precedence: skip directive, literal override directive, highest-priority
    matching rule, then a generic rectangle sized to the measured box.
    `rules` is either a prepared RuleSet or custom rules to merge with the
    defaults.
    """
    return classify_node(metadata, rules, keys).primitive
