class APIError(Exception):
    """Base class for every failure surfaced by the client.

    Callers only ever see subclasses of this error: invalid URL, unknown,
    unauthorized, network and generic (free text reason) failures.
    """

    @property
    def description(self) -> str:
        return str(self)


class InvalidURLError(APIError):
    def __init__(self, message: str = "Invalid URL"):
        self.message = message
        super().__init__(self.message)


class UnknownError(APIError):
    def __init__(self, message: str = "Unknown error"):
        self.message = message
        super().__init__(self.message)


class UnauthorizedError(APIError):
    def __init__(self, message: str = "Unauthorized"):
        self.message = message
        super().__init__(self.message)


class NetworkError(APIError):
    """Wraps a transport level failure (connection reset, timeout, cancellation)."""

    def __init__(self, error: BaseException):
        self.error = error
        super().__init__(str(error) or type(error).__name__)


class GenericError(APIError):
    """A failure described by a free text reason.

    Used for missing connectivity, rejected status codes, decoding failures
    and any foreign exception mapped into the taxonomy.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class DecodingError(Exception):
    """Raised by the decoder when a payload does not match the target shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
