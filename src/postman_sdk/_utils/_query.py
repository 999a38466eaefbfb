from typing import Any, Mapping, Optional
from urllib.parse import urlencode


def _stringify(value: Any) -> str:
    # the API spells booleans the JSON way
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """Serialize query parameters, skipping the ones that are not set.

    Parameters are rendered in the mapping's iteration order and encoded as
    ``application/x-www-form-urlencoded`` (a space becomes ``+``). Only
    ``None`` means "absent": ``0``, ``False`` and ``""`` are kept.

    Args:
        params: Parameter names mapped to their (possibly ``None``) values.

    Returns:
        str: ``"?name=value&..."`` or an empty string when nothing is set.

    Examples:
        >>> build_query_string({"workspace": "w1", "name": "My API"})
        '?workspace=w1&name=My+API'
        >>> build_query_string({"limit": 0, "cursor": None})
        '?limit=0'
        >>> build_query_string({"cursor": None})
        ''
    """
    if not params:
        return ""

    present = [
        (name, _stringify(value)) for name, value in params.items() if value is not None
    ]
    if not present:
        return ""

    return f"?{urlencode(present)}"
