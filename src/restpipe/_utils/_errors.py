from contextlib import contextmanager
from typing import Generator

from ..models.errors import APIError, GenericError


def to_api_error(error: BaseException) -> APIError:
    """Normalize any failure into the client's error taxonomy.

    Errors that already belong to the taxonomy pass through unchanged; anything
    else becomes a ``GenericError`` carrying the failure's description.
    """
    if isinstance(error, APIError):
        return error
    return GenericError(str(error) or type(error).__name__)


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager converting foreign exceptions into ``APIError``.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        APIError: The original error if it already is one, otherwise a
            ``GenericError`` chained to it.
    """
    try:
        yield
    except APIError:
        raise
    except Exception as e:
        raise to_api_error(e) from e
