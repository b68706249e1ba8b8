"""
Text rendering shared by the model string forms.

Numbers render the way JavaScript's JSON.stringify renders them: integral
floats without a fraction (1.0 -> 1) and NaN/Infinity as null.
"""
import json
import math
from typing import Any, Iterable, List


def _js_number_form(value: Any) -> Any:
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: _js_number_form(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_js_number_form(v) for v in value]
    return value


def compact_json(value: Any) -> str:
    """JSON without whitespace after separators, non-ASCII kept as-is"""
    return json.dumps(
        _js_number_form(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=str,
    )


def unique_in_order(values: Iterable[str]) -> List[str]:
    """Deduplicate keeping first occurrence"""
    return list(dict.fromkeys(values))
