"""youtrack_client package exports."""

from .client import (
    RetryConfig,
    YouTrackClient,
    YouTrackClientError,
    YouTrackHTTPError,
    YouTrackParseError,
)
from .config import create_client_from_env, load_env_config
from .core import (
    FieldDeclarationError,
    MissingPathParameterError,
    MultipartForm,
    RequestBuilder,
    RequestConstructionError,
    RequestDescriptor,
    UnsupportedPayloadError,
    build_query_param,
    build_uri,
    custom_field,
    encode_body,
    encode_fields,
    fields,
    join_url,
    parse_fields,
    query_params,
    string_param,
)
from .youtrack import YouTrack

__all__ = [
    # Client
    "YouTrack",
    "YouTrackClient",
    "RetryConfig",
    "create_client_from_env",
    "load_env_config",
    # Request construction
    "RequestBuilder",
    "RequestDescriptor",
    "MultipartForm",
    "encode_fields",
    "fields",
    "parse_fields",
    "build_query_param",
    "string_param",
    "query_params",
    "custom_field",
    "build_uri",
    "join_url",
    "encode_body",
    # Exceptions
    "YouTrackClientError",
    "YouTrackHTTPError",
    "YouTrackParseError",
    "RequestConstructionError",
    "FieldDeclarationError",
    "MissingPathParameterError",
    "UnsupportedPayloadError",
]
