from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from httpx import Request, Response

from .errors import APIError

T = TypeVar("T")


class ResponseStatus(str, Enum):
    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECT = "redirect"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    SYSTEM_ERROR = "system_error"
    UNAUTHORIZED = "unauthorized"

    @classmethod
    def from_status_code(cls, status_code: int) -> "ResponseStatus":
        """Classify a numeric HTTP status code.

        Total over all integers: anything outside 100-599 is a system error.
        """
        if 100 <= status_code <= 199:
            return cls.INFORMATIONAL
        if 200 <= status_code <= 299:
            return cls.SUCCESS
        if 300 <= status_code <= 399:
            return cls.REDIRECT
        if 400 <= status_code <= 499:
            if status_code == 401:
                return cls.UNAUTHORIZED
            return cls.CLIENT_ERROR
        if 500 <= status_code <= 599:
            return cls.SERVER_ERROR
        return cls.SYSTEM_ERROR


def classify(status_code: int) -> ResponseStatus:
    return ResponseStatus.from_status_code(status_code)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: APIError


Result = Union[Success[T], Failure]


@dataclass
class DataResponse(Generic[T]):
    """Uniform record of one attempt: request, response, outcome and raw payload."""

    request: Optional[Request]
    response: Optional[Response]
    result: Result[T]
    data: Optional[bytes]

    @property
    def value(self) -> Optional[T]:
        if isinstance(self.result, Success):
            return self.result.value
        return None

    @property
    def error(self) -> Optional[APIError]:
        if isinstance(self.result, Failure):
            return self.result.error
        return None

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None
