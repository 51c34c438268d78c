from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence, Tuple, Union


class HTTPScheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


class HTTPHeaderField(str, Enum):
    CONTENT_TYPE = "Content-Type"
    ACCEPT = "Accept"
    AUTHORIZATION = "Authorization"


class HTTPMethod(str, Enum):
    DELETE = "DELETE"
    GET = "GET"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"

    @property
    def carries_body(self) -> bool:
        return self in (HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.PATCH)


@dataclass(frozen=True)
class Multipart:
    """A file upload sent as ``multipart/form-data``.

    The request is always sent as POST. ``form_data`` fields are encoded
    before the file section.
    """

    filename: str
    data: bytes
    mime_type: str
    form_data: Optional[Mapping[str, str]] = None


@dataclass(frozen=True)
class Endpoint:
    """Declarative description of a single HTTP endpoint.

    An endpoint separates the task of constructing a URL, its parameters and
    HTTP method from the act of executing the request and parsing the response.

    Examples:
        >>> Endpoint(
        ...     authority="api.example.com",
        ...     path="/v1/users",
        ...     query_parameters=[("page", "2")],
        ...     headers={HTTPHeaderField.ACCEPT: "application/json"},
        ... )
    """

    authority: str
    path: str = ""
    scheme: HTTPScheme = HTTPScheme.HTTPS
    query_parameters: Sequence[Tuple[str, str]] = field(default_factory=tuple)
    method: Union[HTTPMethod, Multipart] = HTTPMethod.GET
    headers: Mapping[HTTPHeaderField, str] = field(default_factory=dict)
    body: Optional[bytes] = None
