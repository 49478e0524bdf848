from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import IO, Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from .errors import UnsupportedPayloadError

JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

FileContent = Union[bytes, str, IO[bytes]]


@dataclass(frozen=True)
class FormFile:
    filename: str
    content: FileContent
    content_type: Optional[str] = None


@dataclass(eq=False)
class MultipartForm:
    """
    Upload container handed through the core untouched.
    Mirrors a browser FormData: plain fields plus named files, in append order.
    """

    fields: List[Tuple[str, str]] = field(default_factory=list)
    files: List[Tuple[str, FormFile]] = field(default_factory=list)

    def append(self, name: str, value: str) -> "MultipartForm":
        self.fields.append((name, value))
        return self

    def append_file(
        self,
        name: str,
        content: FileContent,
        filename: str,
        content_type: Optional[str] = None,
    ) -> "MultipartForm":
        self.files.append((name, FormFile(filename, content, content_type)))
        return self


@dataclass(frozen=True)
class EncodedBody:
    content: Union[str, MultipartForm, None] = None
    content_type: Optional[str] = None


Payload = Union[MultipartForm, str, Mapping[str, Any], List[Any], BaseModel, None]


def encode_body(payload: Payload) -> EncodedBody:
    """
    Normalize a request payload for transport.
    - None -> no body, no content type
    - MultipartForm -> passed through as-is, multipart content type
    - str -> passed through as-is, no content type hint
    - mapping/list/pydantic model -> JSON text, key order kept
    Anything else raises UnsupportedPayloadError.
    """
    if payload is None:
        return EncodedBody()
    if isinstance(payload, MultipartForm):
        return EncodedBody(payload, MULTIPART_CONTENT_TYPE)
    if isinstance(payload, str):
        return EncodedBody(payload)
    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
        try:
            text = json.dumps(data, allow_nan=False)
        except ValueError as exc:
            raise UnsupportedPayloadError(payload) from exc
        return EncodedBody(text, JSON_CONTENT_TYPE)
    if isinstance(payload, (Mapping, list, tuple)):
        try:
            text = json.dumps(
                payload if isinstance(payload, (dict, list, tuple)) else dict(payload),
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise UnsupportedPayloadError(payload) from exc
        return EncodedBody(text, JSON_CONTENT_TYPE)
    raise UnsupportedPayloadError(payload)


__all__ = [
    "JSON_CONTENT_TYPE",
    "MULTIPART_CONTENT_TYPE",
    "FileContent",
    "FormFile",
    "MultipartForm",
    "EncodedBody",
    "Payload",
    "encode_body",
]
