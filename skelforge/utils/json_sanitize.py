import json
from typing import Any


def _fallback(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return repr(value)


def stable_dumps(value: Any) -> str:
    """
    Deterministic JSON text: sorted keys, compact separators.
    Values JSON cannot express are replaced by a stable stand-in.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=_fallback)
