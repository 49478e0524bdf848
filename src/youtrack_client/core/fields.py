"""
Field selection for YouTrack responses.

YouTrack returns only entity ids unless the request names the attributes it
wants through the `fields` query parameter. A field declaration is a list of
leaf names and single-key dicts for nested attributes:

    ["id", "summary", {"reporter": ["login", {"profile": ["email"]}]}]

which renders as `fields=id,summary,reporter(login,profile(email))`.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import unquote

from .errors import FieldDeclarationError
from .uri import encode_component

FIELDS_KEY = "fields"

Field = Union[str, Mapping[str, "FieldsSchema"]]
FieldsSchema = Sequence[Field]
Schema = Union[str, FieldsSchema]


def _render_name(name: Any) -> str:
    if not isinstance(name, str):
        raise FieldDeclarationError(
            f"Field names must be strings, got {type(name).__name__}: {name!r}"
        )
    if not name:
        raise FieldDeclarationError("Field names must be non-empty.")
    return encode_component(name)


def _render_schema(schema: Any) -> str:
    if isinstance(schema, (str, bytes)) or not isinstance(schema, Sequence):
        raise FieldDeclarationError(
            f"Nested fields must be a list, got {type(schema).__name__}: {schema!r}"
        )

    parts: List[str] = []
    for item in schema:
        if isinstance(item, Mapping):
            if len(item) != 1:
                raise FieldDeclarationError(
                    f"Nested field entries need exactly one key, got {list(item)!r}"
                )
            ((name, children),) = item.items()
            parts.append(f"{_render_name(name)}({_render_schema(children)})")
        else:
            parts.append(_render_name(item))
    return ",".join(parts)


def encode_fields(schema: Optional[Schema] = None) -> str:
    """
    Render a field declaration as the `fields=` query fragment.
    - None or [] -> "" (server default: ids only)
    - str -> taken as already rendered: "id,name" -> "fields=id,name"
    - list -> rendered recursively in declaration order
    Raises FieldDeclarationError on malformed declarations.
    """
    if schema is None:
        return ""
    rendered = schema if isinstance(schema, str) else _render_schema(schema)
    return f"{FIELDS_KEY}={rendered}" if rendered else ""


# Builder registered under FIELDS_KEY in endpoint declarations.
fields = encode_fields


def _decode_name(raw: str) -> str:
    return unquote(raw.strip())


def _parse(text: str, pos: int, nested: bool) -> Tuple[List[Field], int]:
    items: List[Field] = []
    start = pos
    while pos < len(text):
        char = text[pos]
        if char == ",":
            name = _decode_name(text[start:pos])
            if name:
                items.append(name)
            pos += 1
            start = pos
        elif char == "(":
            name = _decode_name(text[start:pos])
            if not name:
                raise FieldDeclarationError(f"Missing field name before '(' at {pos}")
            children, pos = _parse(text, pos + 1, nested=True)
            items.append({name: children})
            while pos < len(text) and text[pos] == " ":
                pos += 1
            if pos < len(text) and text[pos] not in ",)":
                raise FieldDeclarationError(
                    f"Expected ',' or ')' after nested field {name!r} at {pos}"
                )
            start = pos
        elif char == ")":
            if not nested:
                raise FieldDeclarationError(f"Unbalanced ')' at {pos}")
            name = _decode_name(text[start:pos])
            if name:
                items.append(name)
            return items, pos + 1
        else:
            pos += 1

    if nested:
        raise FieldDeclarationError("Missing closing ')' in fields string.")
    name = _decode_name(text[start:])
    if name:
        items.append(name)
    return items, pos


def parse_fields(text: str) -> List[Field]:
    """
    Parse the wire grammar back into a field declaration.
    Names are percent-decoded, so encode_fields(parse_fields(s)) == "fields=" + s
    holds for wire-encoded strings ("id,%24type"). A raw "$type" re-encodes
    as "%24type".
    Example: parse_fields('name,topic(id,value(name)),color')
      -> ['name', {'topic': ['id', {'value': ['name']}]}, 'color']
    """
    items, _ = _parse(text, 0, nested=False)
    return items


__all__ = [
    "FIELDS_KEY",
    "Field",
    "FieldsSchema",
    "Schema",
    "encode_fields",
    "fields",
    "parse_fields",
]
