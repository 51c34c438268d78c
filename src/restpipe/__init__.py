from ._config import Config
from ._services import NetworkManager
from ._utils import (
    APILogger,
    assume_connected,
    build_request,
    decode,
    handle_errors,
    setup_logging,
    to_api_error,
)
from .models import (
    APIError,
    DataResponse,
    DecodingError,
    Endpoint,
    Failure,
    GenericError,
    HTTPHeaderField,
    HTTPMethod,
    HTTPScheme,
    InvalidURLError,
    Multipart,
    NetworkError,
    ResponseStatus,
    Result,
    Success,
    UnauthorizedError,
    UnknownError,
    classify,
)

__all__ = [
    "Config",
    "NetworkManager",
    "APILogger",
    "assume_connected",
    "build_request",
    "decode",
    "handle_errors",
    "setup_logging",
    "to_api_error",
    "APIError",
    "DataResponse",
    "DecodingError",
    "Endpoint",
    "Failure",
    "GenericError",
    "HTTPHeaderField",
    "HTTPMethod",
    "HTTPScheme",
    "InvalidURLError",
    "Multipart",
    "NetworkError",
    "ResponseStatus",
    "Result",
    "Success",
    "UnauthorizedError",
    "UnknownError",
    "classify",
]
