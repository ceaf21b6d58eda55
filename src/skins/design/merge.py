"""Recursive merge of partial overrides onto catalog records.

Rules:
 - Mappings merge key by key, at any depth.
 - Lists, tuples and scalars in ``override`` replace the base value wholesale;
   arrays are never concatenated or merged element-wise.
 - ``None`` in ``override`` means "not specified" and never clears a base value.
 - Keys present only in ``override`` are added.
 - Neither argument is mutated; the result shares no containers with either.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

__all__ = ["deep_merge"]


def deep_merge(base: Mapping[str, Any], override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a fresh dict equal to ``base`` with ``override`` merged on top."""
    result: Dict[str, Any] = {key: copy.deepcopy(value) for key, value in base.items()}
    if not override:
        return result
    for key, value in override.items():
        if value is None:
            continue
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result
