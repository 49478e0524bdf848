from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel

from .body import MULTIPART_CONTENT_TYPE, MultipartForm, Payload, encode_body
from .errors import (
    MissingPathParameterError,
    RequestConstructionError,
    UnsupportedPayloadError,
)
from .params import BaseParams
from .query import QueryParamBuilder, build_query_param
from .uri import build_uri, find_placeholders

# Builder shorthands: the value is encoded with build_query_param under its own key.
TYPE_TAGS = frozenset({"string", "number", "boolean"})

Builders = Mapping[str, Union[QueryParamBuilder, str]]
Params = Union[Mapping[str, Any], BaseModel, None]


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Transport-ready request. `method` is None for GET, which is the implicit default.
    """

    url: str
    method: Optional[str] = None
    body: Union[str, MultipartForm, None] = None
    # Read-only mapping; left out of __hash__.
    headers: Optional[Mapping[str, str]] = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.headers is not None:
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def http_method(self) -> str:
        return self.method or "GET"

    def as_dict(self) -> Dict[str, Any]:
        """Minimal dict form; unset members are omitted."""
        out: Dict[str, Any] = {"url": self.url}
        if self.method is not None:
            out["method"] = self.method
        if self.body is not None:
            out["body"] = self.body
        if self.headers is not None:
            out["headers"] = dict(self.headers)
        return out


def _normalize_params(params: Params) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, BaseParams):
        return params.to_query()
    if isinstance(params, BaseModel):
        return params.model_dump(by_alias=True, exclude_none=True)
    return dict(params)


class RequestBuilder:
    """
    Compose a request descriptor from a path template, the query parameters an
    endpoint accepts and the values a caller supplied.

        RequestBuilder(
            "api/issues/:issueId/links",
            {"fields": fields, **query_params("$skip", "$top")},
            {"fields": ["id", "direction"], "$top": 10},
            path_params={"issueId": "PRJ-1"},
        ).get()

    Query fragments follow the declared order of `builders`; supplied keys
    that are not declared are ignored. Construction resolves the path and
    raises MissingPathParameterError for any placeholder left over.
    """

    def __init__(
        self,
        path: str,
        builders: Builders,
        params: Params = None,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
    ):
        url = build_uri(path, path_params)
        missing = find_placeholders(urlsplit(url).path)
        if missing:
            raise MissingPathParameterError(path, missing)

        for key, builder in builders.items():
            if isinstance(builder, str) and builder not in TYPE_TAGS:
                raise RequestConstructionError(
                    f"Unknown builder tag {builder!r} for query parameter {key!r}"
                )

        self._url = url
        self._builders = dict(builders)
        self._params = _normalize_params(params)

    def _query(self) -> str:
        args: List[str] = []
        for key, builder in self._builders.items():
            if key not in self._params:
                continue
            value = self._params[key]
            if isinstance(builder, str):
                arg = build_query_param(key, value)
            else:
                arg = builder(value)
            if isinstance(arg, list):
                args.extend(a for a in arg if a)
            elif arg:
                args.append(arg)
        return "&".join(args)

    def _build(
        self,
        method: Optional[str] = None,
        body: Union[str, MultipartForm, None] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestDescriptor:
        query = self._query()
        url = f"{self._url}?{query}" if query else self._url
        return RequestDescriptor(url=url, method=method, body=body, headers=headers)

    def _build_with_payload(self, method: str, payload: Payload) -> RequestDescriptor:
        encoded = encode_body(payload)
        headers = (
            {"Content-Type": encoded.content_type} if encoded.content_type else None
        )
        return self._build(method, encoded.content, headers)

    def get(self) -> RequestDescriptor:
        return self._build()

    def post(self, payload: Payload) -> RequestDescriptor:
        return self._build_with_payload("POST", payload)

    def post_file(self, form: MultipartForm) -> RequestDescriptor:
        if not isinstance(form, MultipartForm):
            raise UnsupportedPayloadError(form)
        return self._build("POST", form, {"Content-Type": MULTIPART_CONTENT_TYPE})

    def put(self, payload: Payload = None) -> RequestDescriptor:
        return self._build_with_payload("PUT", payload)

    def patch(self, payload: Payload = None) -> RequestDescriptor:
        return self._build_with_payload("PATCH", payload)

    def delete(self) -> RequestDescriptor:
        return self._build("DELETE")


__all__ = ["TYPE_TAGS", "Builders", "Params", "RequestDescriptor", "RequestBuilder"]
