"""Pydantic schemas for validating mapping rules given as plain data."""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .schema import MappingRule, RuleMatch, RuleTarget

logger = logging.getLogger(__name__)


class RuleMatchModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Optional[str] = Field(default=None, validation_alias=AliasChoices("kind", "tag"))
    class_contains: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("classContains", "class_contains")
    )
    role: Optional[str] = None
    attr: Optional[Dict[str, str]] = None


class RuleSizeModel(BaseModel):
    w: Optional[str] = None
    h: Optional[str] = None


class RuleTargetModel(BaseModel):
    shape: Literal["rect", "circle", "line"]
    size: Optional[RuleSizeModel] = None
    lines: Optional[int] = Field(default=None, ge=1)
    radius: Optional[str] = None


class MappingRuleModel(BaseModel):
    match: RuleMatchModel
    to: RuleTargetModel
    priority: float

    @field_validator("priority", mode="before")
    @classmethod
    def priority_is_number(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("priority must be a number")
        if not math.isfinite(value):
            raise ValueError("priority must be finite")
        return value

    def to_rule(self) -> MappingRule:
        size = self.to.size or RuleSizeModel()
        return MappingRule(
            match=RuleMatch(
                kind=self.match.kind,
                class_contains=self.match.class_contains,
                role=self.match.role,
                attr=self.match.attr,
            ),
            to=RuleTarget(
                shape=self.to.shape,
                width=size.w,
                height=size.h,
                lines=self.to.lines,
                radius=self.to.radius,
            ),
            priority=self.priority,
        )


def coerce_rule(raw: Union[MappingRule, Dict[str, Any]]) -> Optional[MappingRule]:
    """
    Validate one rule. Returns None (and logs why) when the rule is invalid.
    Invalid rules are never repaired.
    """
    data = raw.to_dict() if isinstance(raw, MappingRule) else raw
    if not isinstance(data, dict):
        logger.warning("Invalid mapping rule dropped (not an object): %r", raw)
        return None
    try:
        return MappingRuleModel.model_validate(data).to_rule()
    except ValidationError as exc:
        reasons = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        logger.warning("Invalid mapping rule dropped (%s): %r", reasons, data)
        return None


def load_rules(source: Union[str, Path]) -> List[MappingRule]:
    """
    Read a JSON array of rules from a file path or a JSON string.
    Invalid entries are dropped individually; a malformed document raises ValueError.
    """
    if isinstance(source, Path) or not str(source).lstrip().startswith("["):
        text = Path(source).read_text(encoding="utf-8")
    else:
        text = str(source)
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("mapping rules must be a JSON array")
    rules: List[MappingRule] = []
    for item in data:
        parsed = coerce_rule(item)
        if parsed is not None:
            rules.append(parsed)
    return rules
