from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Union

from .uri import encode_component

Scalar = Union[str, int, float, bool]
QueryValue = Union[Scalar, Sequence[Scalar]]
QueryFragment = Union[str, List[str]]
QueryParamBuilder = Callable[..., QueryFragment]


def build_query_param(key: str, value: Optional[QueryValue] = None) -> QueryFragment:
    """
    Encode one query parameter.
    - None -> "" (parameter omitted)
    - list/tuple -> one "key=item" fragment per element, order kept
    - scalar -> "key=value"
    """
    if value is None:
        return ""
    name = encode_component(key)
    if isinstance(value, (list, tuple)):
        return [f"{name}={encode_component(item)}" for item in value]
    return f"{name}={encode_component(value)}"


def string_param(key: str) -> QueryParamBuilder:
    def builder(value: Optional[QueryValue] = None) -> QueryFragment:
        return build_query_param(key, value)

    builder.__name__ = f"param_{key}"
    return builder


def query_params(*keys: str) -> Dict[str, QueryParamBuilder]:
    """
    Declare the query parameters an endpoint accepts.
    Example: {**query_params('$skip', '$top'), 'query': 'string'}
    """
    return {key: string_param(key) for key in keys}


custom_field = string_param("customField")


__all__ = [
    "Scalar",
    "QueryValue",
    "QueryFragment",
    "QueryParamBuilder",
    "build_query_param",
    "string_param",
    "query_params",
    "custom_field",
]
