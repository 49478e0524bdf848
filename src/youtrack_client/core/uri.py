from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote

# Characters left unescaped by JavaScript's encodeURIComponent; YouTrack
# expects the same escaping on the wire.
_COMPONENT_SAFE = "-_.!~*'()"

PLACEHOLDER_RE = re.compile(r":([A-Za-z_]\w*)")


def format_value(value: Any) -> str:
    """Render a scalar the way it should appear on the wire (true/false, 10, 1.5)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_component(value: Any) -> str:
    return quote(format_value(value), safe=_COMPONENT_SAFE)


def find_placeholders(template: str) -> List[str]:
    """
    Names of the `:name` placeholders in a path template, in order of appearance.
    Example: find_placeholders('api/issues/:issueId/links/:linkId') -> ['issueId', 'linkId']
    """
    return PLACEHOLDER_RE.findall(template)


def build_uri(template: str, path_params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute `:name` placeholders with URL-segment-safe values.
    Placeholders without a value (missing or None) in `path_params` are left untouched.
    Example: build_uri('/api/items/:itemId', {'itemId': '123'}) -> '/api/items/123'
    """
    if not path_params:
        return template

    def _replace(match: re.Match) -> str:
        value = path_params.get(match.group(1))
        if value is None:
            return match.group(0)
        return encode_component(value)

    return PLACEHOLDER_RE.sub(_replace, template)


def join_url(base_url: str, url: str) -> str:
    """Join a base URL and a relative path with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{url.lstrip('/')}"


def create_params_map(
    keys: Sequence[str] = (), values: Sequence[Any] = ()
) -> Dict[str, str]:
    return {key: format_value(value) for key, value in zip(keys, values)}


__all__ = [
    "PLACEHOLDER_RE",
    "format_value",
    "encode_component",
    "find_placeholders",
    "build_uri",
    "join_url",
    "create_params_map",
]
