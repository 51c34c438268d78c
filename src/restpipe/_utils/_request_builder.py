import re
from typing import Any, Dict

from httpx import URL, Headers, InvalidURL, Request

from ..models.endpoint import Endpoint, HTTPMethod, Multipart
from ..models.errors import InvalidURLError
from ._multipart import generate_boundary, multipart_content_type, multipart_files
from .constants import HEADER_CONTENT_TYPE


# host (or bracketed IPv6 literal) with an optional numeric port
AUTHORITY_PATTERN = re.compile(r"^(\[[0-9A-Fa-f:.]+\]|[^:/?#@\[\]\s]+)(:\d+)?$")


def _encode_path(path: str) -> str:
    # "?" and "#" belong to the path, never to the query or fragment
    return path.replace("?", "%3F").replace("#", "%23")


def build_url(endpoint: Endpoint) -> URL:
    """Assemble the absolute URL from scheme, authority, path and query items.

    Each part keeps its role: ``?`` and ``#`` in the path are percent-encoded and
    the authority must be ``host[:port]``. Query item order is preserved.

    Raises:
        InvalidURLError: If the parts cannot form a valid absolute URL.
    """
    if not AUTHORITY_PATTERN.fullmatch(endpoint.authority):
        raise InvalidURLError()
    if endpoint.path and not endpoint.path.startswith("/"):
        raise InvalidURLError()

    scheme = getattr(endpoint.scheme, "value", endpoint.scheme)
    params = [(name, value) for name, value in endpoint.query_parameters]
    try:
        url = URL(
            f"{scheme}://{endpoint.authority}",
            path=_encode_path(endpoint.path),
            params=params,
        )
    except (InvalidURL, TypeError, ValueError) as e:
        raise InvalidURLError() from e

    if not url.is_absolute_url or not url.host:
        raise InvalidURLError()
    return url


def build_request(endpoint: Endpoint) -> Request:
    """Translate an endpoint into a transport ready request.

    GET and DELETE never carry a body. POST, PUT and PATCH send ``endpoint.body``
    verbatim. A multipart endpoint is always sent as POST with a freshly
    generated boundary; its ``Content-Type`` overrides any header the caller set.

    The returned request has its body fully read so it can be replayed on retry.

    Raises:
        InvalidURLError: If the endpoint does not form a valid absolute URL.
    """
    url = build_url(endpoint)
    headers = Headers(
        {getattr(name, "value", name): value for name, value in endpoint.headers.items()}
    )
    kwargs: Dict[str, Any] = {}

    if isinstance(endpoint.method, Multipart):
        upload = endpoint.method
        boundary = generate_boundary()
        method = HTTPMethod.POST.value
        headers[HEADER_CONTENT_TYPE] = multipart_content_type(boundary)
        kwargs["data"] = dict(upload.form_data or {})
        kwargs["files"] = multipart_files(upload.filename, upload.data, upload.mime_type)
    else:
        method = HTTPMethod(endpoint.method).value
        if HTTPMethod(endpoint.method).carries_body and endpoint.body is not None:
            kwargs["content"] = endpoint.body

    request = Request(method, url, headers=headers, **kwargs)
    request.read()
    return request
