from .endpoint import Endpoint, HTTPHeaderField, HTTPMethod, HTTPScheme, Multipart
from .errors import (
    APIError,
    DecodingError,
    GenericError,
    InvalidURLError,
    NetworkError,
    UnauthorizedError,
    UnknownError,
)
from .response import (
    DataResponse,
    Failure,
    ResponseStatus,
    Result,
    Success,
    classify,
)

__all__ = [
    "Endpoint",
    "HTTPHeaderField",
    "HTTPMethod",
    "HTTPScheme",
    "Multipart",
    "APIError",
    "DecodingError",
    "GenericError",
    "InvalidURLError",
    "NetworkError",
    "UnauthorizedError",
    "UnknownError",
    "DataResponse",
    "Failure",
    "ResponseStatus",
    "Result",
    "Success",
    "classify",
]
