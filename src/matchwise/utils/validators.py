"""Input coercion shared by Pydantic model validators."""

import json
from typing import Any


def coerce_str_list(v: Any) -> list[str]:
    """Coerce various inputs to list of strings for upstream/LLM robustness.

    Examples:
        >>> coerce_str_list("React, TypeScript")
        ['React', 'TypeScript']
        >>> coerce_str_list('["Vue"]')
        ['Vue']
        >>> coerce_str_list(None)
        []
    """
    if v is None:
        return []
    if isinstance(v, list):
        return [str(item) for item in v]
    if isinstance(v, str):
        # Try to parse as JSON array first
        v = v.strip()
        if v.startswith("["):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(item) for item in parsed]
            except json.JSONDecodeError:
                pass
        # Treat as comma-separated or single item
        if "," in v:
            return [item.strip() for item in v.split(",") if item.strip()]
        return [v] if v else []
    return [str(v)]


def none_if_blank(v: Any) -> Any:
    """Map empty or whitespace-only strings to None; upstream records store
    unanswered fields that way."""
    if isinstance(v, str) and not v.strip():
        return None
    return v
