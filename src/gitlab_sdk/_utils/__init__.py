from ._encoding import (
    JSONValue,
    QueryItem,
    encode_query_items,
    encode_query_string,
    encode_scalar,
)
from ._endpoint import Endpoint
from ._logs import setup_logging
from ._options import (
    EncodedPayload,
    MultipartFile,
    Option,
    OptionLocation,
    OptionsCollection,
)
from ._request_spec import AuthProvider, RequestSpec
from ._transport import (
    HttpxTransport,
    Transport,
    TransportRequest,
    TransportResponse,
)

__all__ = [
    "AuthProvider",
    "EncodedPayload",
    "Endpoint",
    "HttpxTransport",
    "JSONValue",
    "MultipartFile",
    "Option",
    "OptionLocation",
    "OptionsCollection",
    "QueryItem",
    "RequestSpec",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "encode_query_items",
    "encode_query_string",
    "encode_scalar",
    "setup_logging",
]
