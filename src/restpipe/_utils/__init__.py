from ._api_logger import APILogger
from ._connectivity import ConnectivityCheck, assume_connected
from ._decoder import decode
from ._errors import handle_errors, to_api_error
from ._logs import setup_logging
from ._multipart import generate_boundary, infer_content_type, multipart_content_type
from ._request_builder import build_request, build_url
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "APILogger",
    "ConnectivityCheck",
    "assume_connected",
    "decode",
    "handle_errors",
    "to_api_error",
    "setup_logging",
    "generate_boundary",
    "infer_content_type",
    "multipart_content_type",
    "build_request",
    "build_url",
    "get_httpx_client_kwargs",
]
