"""Request construction for the YouTrack REST API (pure, transport-agnostic)."""

from .body import (
    JSON_CONTENT_TYPE,
    MULTIPART_CONTENT_TYPE,
    EncodedBody,
    FormFile,
    MultipartForm,
    encode_body,
)
from .errors import (
    FieldDeclarationError,
    MissingPathParameterError,
    RequestConstructionError,
    UnsupportedPayloadError,
)
from .fields import FIELDS_KEY, FieldsSchema, encode_fields, fields, parse_fields
from .params import (
    BaseParams,
    CustomFieldsParam,
    FieldsParam,
    ListParams,
    MuteUpdateNotificationsParam,
    QueryParam,
)
from .query import build_query_param, custom_field, query_params, string_param
from .request import RequestBuilder, RequestDescriptor
from .uri import build_uri, create_params_map, find_placeholders, join_url

__all__ = [
    # Request builder
    "RequestBuilder",
    "RequestDescriptor",
    # Fields
    "FIELDS_KEY",
    "FieldsSchema",
    "encode_fields",
    "fields",
    "parse_fields",
    # Query parameters
    "build_query_param",
    "string_param",
    "query_params",
    "custom_field",
    # URIs
    "build_uri",
    "find_placeholders",
    "join_url",
    "create_params_map",
    # Bodies
    "encode_body",
    "EncodedBody",
    "MultipartForm",
    "FormFile",
    "JSON_CONTENT_TYPE",
    "MULTIPART_CONTENT_TYPE",
    # Parameter records
    "BaseParams",
    "FieldsParam",
    "ListParams",
    "CustomFieldsParam",
    "QueryParam",
    "MuteUpdateNotificationsParam",
    # Errors
    "RequestConstructionError",
    "FieldDeclarationError",
    "MissingPathParameterError",
    "UnsupportedPayloadError",
]
