from __future__ import annotations

from typing import Sequence


class RequestConstructionError(ValueError):
    """Base error for request descriptors that cannot be built."""


class FieldDeclarationError(RequestConstructionError):
    pass


class MissingPathParameterError(RequestConstructionError):
    def __init__(self, template: str, missing: Sequence[str]):
        names = ", ".join(missing)
        super().__init__(f"Unresolved path placeholder(s) in {template!r}: {names}")
        self.template = template
        self.missing = tuple(missing)


class UnsupportedPayloadError(RequestConstructionError):
    def __init__(self, payload: object):
        super().__init__(
            f"Cannot encode request payload of type {type(payload).__name__}"
        )
        self.payload_type = type(payload)


__all__ = [
    "RequestConstructionError",
    "FieldDeclarationError",
    "MissingPathParameterError",
    "UnsupportedPayloadError",
]
