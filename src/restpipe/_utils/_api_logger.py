from logging import getLogger
from typing import Any, List
from urllib.parse import unquote

from ..models.errors import NetworkError
from ..models.response import DataResponse
from .constants import LOGGER_NAME

BEARER_PREFIX = "Bearer"
BEARER_VISIBLE_CHARS = 15


def _mask_header(name: str, value: str) -> str:
    if value.startswith(BEARER_PREFIX):
        return f"{name}: {value[:BEARER_VISIBLE_CHARS]}..."
    return f"{name}: {value}"


def _utf8(data: bytes | None) -> str:
    if not data:
        return ""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return ""


class APILogger:
    """Renders a ``DataResponse`` into a single console record.

    Example output::

        🚀 GET https://api.example.com/v1/users?page=2
        🤯 Accept: application/json
           Authorization: Bearer eyJhbGc...
        ✅ 200
        📦 {"users": []}
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._logger = getLogger(LOGGER_NAME)

    def __call__(self, response: DataResponse[Any]) -> None:
        self.log_data_response(response)

    def format(self, response: DataResponse[Any]) -> str:
        lines: List[str] = []
        request = response.request

        if request is not None:
            url = unquote(str(request.url))
            if url.endswith("?"):
                url = url[:-1]
            lines.append(f"🚀 {request.method} {url}")

            encoding = request.headers.encoding
            headers = [
                _mask_header(key.decode(encoding), value.decode(encoding))
                for key, value in request.headers.raw
            ]
            if headers:
                lines.append("🤯 " + "\n   ".join(headers))

            body = _utf8(request.content)
            if body:
                lines.append(f"📤 {body}")

        if response.response is not None:
            status_code = response.response.status_code
            marker = "✅" if 200 <= status_code < 300 else "❌"
            lines.append(f"{marker} {status_code}")

        payload = _utf8(response.data)
        if payload:
            lines.append(f"📦 {payload}")

        error = response.error
        if isinstance(error, NetworkError):
            lines.append(f"‼️ [{type(error.error).__name__}] {error.description}")
        elif error is not None:
            lines.append(f"‼️ {error.description}")

        return "\n".join(lines)

    def log_data_response(self, response: DataResponse[Any]) -> None:
        if not self.enabled:
            return
        self._logger.info(self.format(response))
