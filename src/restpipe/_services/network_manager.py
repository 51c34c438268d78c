import asyncio
from logging import getLogger
from typing import Any, AsyncIterator, Callable, Optional, Set, Type, TypeVar

from httpx import AsyncClient, Client, Request, Response, TransportError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
)

from .._config import Config
from .._utils import (
    APILogger,
    ConnectivityCheck,
    assume_connected,
    build_request,
    decode,
    get_httpx_client_kwargs,
    to_api_error,
)
from .._utils.constants import (
    LOGGER_NAME,
    NO_CONNECTIVITY_REASON,
    SERVER_ERROR_REASON,
)
from ..models import (
    DataResponse,
    Endpoint,
    Failure,
    GenericError,
    NetworkError,
    ResponseStatus,
    Result,
    Success,
    UnauthorizedError,
)

T = TypeVar("T")

ResponseObserver = Callable[[DataResponse[Any]], None]
Completion = Callable[[Result[T]], None]


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, TransportError)


class NetworkManager:
    """Executes endpoints and decodes their JSON responses.

    Every call runs the same pipeline: connectivity check, request build,
    transport send (retried once on transport failure), status classification,
    decoding and error mapping. The pipeline is exposed as a blocking call,
    a suspending call, a single value async stream and a completion callback.

    Transport clients can be injected. Clients owned by the manager are built
    on first use and closed by ``close``/``aclose`` or when leaving the
    context manager.

    Examples:
        >>> async with NetworkManager() as manager:
        ...     user = await manager.request_async(endpoint, User)
    """

    MAX_RETRIES = 1

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
        connectivity: Optional[ConnectivityCheck] = None,
        observer: Optional[ResponseObserver] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()

        # owned clients are created on first use
        self._owns_client = client is None
        self._owns_async_client = async_client is None
        self._client: Optional[Client] = client
        self._client_async: Optional[AsyncClient] = async_client

        self._connectivity = connectivity or assume_connected
        self._observer = observer or APILogger(enabled=self._config.logging_enabled)
        self._pending: Set["asyncio.Task[None]"] = set()

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(**self._client_kwargs())
        return self._client

    @property
    def client_async(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs())
        return self._client_async

    def _client_kwargs(self) -> dict[str, Any]:
        return get_httpx_client_kwargs(
            timeout=self._config.timeout,
            follow_redirects=self._config.follow_redirects,
        )

    # Calling conventions

    def request(self, endpoint: Endpoint, shape: Type[T]) -> T:
        """Execute ``endpoint`` and decode the response into ``shape``, blocking.

        Raises:
            APIError: Any failure, mapped into the client's error taxonomy.
        """
        return self._unwrap(self.response(endpoint, shape))

    async def request_async(self, endpoint: Endpoint, shape: Type[T]) -> T:
        """Async version of request()."""
        return self._unwrap(await self.response_async(endpoint, shape))

    async def publisher(self, endpoint: Endpoint, shape: Type[T]) -> AsyncIterator[T]:
        """Cold, single value stream of the decoded response.

        Nothing is sent until iteration starts. The stream yields exactly one
        value or raises exactly one ``APIError``.

        Examples:
            >>> async for user in manager.publisher(endpoint, User):
            ...     print(user.name)
        """
        yield await self.request_async(endpoint, shape)

    def request_with_completion(
        self,
        endpoint: Endpoint,
        shape: Type[T],
        completion: Completion[T],
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> "asyncio.Task[None]":
        """Schedule the call and report its ``Result`` to ``completion``.

        ``completion`` is invoked exactly once, on ``loop`` (the running loop
        by default). A cancelled call completes with a ``NetworkError``.

        Returns:
            asyncio.Task: The scheduled call.
        """
        loop = loop or asyncio.get_running_loop()

        def deliver(result: Result[T]) -> None:
            try:
                completion(result)
            except Exception:
                self._logger.warning("Completion callback failed", exc_info=True)

        async def run() -> None:
            envelope = await self.response_async(endpoint, shape)
            deliver(envelope.result)

        def on_done(task: "asyncio.Task[None]") -> None:
            self._pending.discard(task)
            # run() delivers after its last await, so a cancelled task has not delivered
            if task.cancelled():
                deliver(Failure(NetworkError(asyncio.CancelledError())))

        task = loop.create_task(run())
        self._pending.add(task)
        task.add_done_callback(on_done)
        return task

    def response(self, endpoint: Endpoint, shape: Type[T]) -> DataResponse[T]:
        """Execute ``endpoint`` and return the full response envelope."""
        request: Optional[Request] = None
        http_response: Optional[Response] = None
        try:
            request = self._prepare(endpoint)
            http_response = self._send(request)
            value = self._complete(http_response, shape)
        except Exception as e:
            return self._failure(request, http_response, e)
        return DataResponse(
            request=request,
            response=http_response,
            result=Success(value),
            data=http_response.content,
        )

    async def response_async(
        self, endpoint: Endpoint, shape: Type[T]
    ) -> DataResponse[T]:
        """Async version of response()."""
        request: Optional[Request] = None
        http_response: Optional[Response] = None
        try:
            request = self._prepare(endpoint)
            http_response = await self._send_async(request)
            value = self._complete(http_response, shape)
        except Exception as e:
            return self._failure(request, http_response, e)
        return DataResponse(
            request=request,
            response=http_response,
            result=Success(value),
            data=http_response.content,
        )

    # Pipeline

    def _prepare(self, endpoint: Endpoint) -> Request:
        if not self._connectivity():
            raise GenericError(NO_CONNECTIVITY_REASON)
        request = build_request(endpoint)
        self._logger.debug(f"Request: {request.method} {request.url}")
        return request

    def _retry_policy(self) -> dict[str, Any]:
        return {
            "retry": retry_if_exception(is_retryable_exception),
            "stop": stop_after_attempt(self.MAX_RETRIES + 1),
            "before_sleep": self._log_retry,
            "reraise": True,
        }

    def _send(self, request: Request) -> Response:
        request.extensions.setdefault("timeout", self.client.timeout.as_dict())
        try:
            for attempt in Retrying(**self._retry_policy()):
                with attempt:
                    response = self._attempt(request)
        except TransportError as e:
            raise NetworkError(e) from e
        return response

    async def _send_async(self, request: Request) -> Response:
        request.extensions.setdefault("timeout", self.client_async.timeout.as_dict())
        try:
            async for attempt in AsyncRetrying(**self._retry_policy()):
                with attempt:
                    response = await self._attempt_async(request)
        except TransportError as e:
            raise NetworkError(e) from e
        return response

    def _attempt(self, request: Request) -> Response:
        try:
            response = self.client.send(request)
        except TransportError as e:
            self._notify_transport_failure(request, e)
            raise
        self._notify_response(request, response)
        return response

    async def _attempt_async(self, request: Request) -> Response:
        try:
            response = await self.client_async.send(request)
        except TransportError as e:
            self._notify_transport_failure(request, e)
            raise
        self._notify_response(request, response)
        return response

    def _complete(self, response: Response, shape: Type[T]) -> T:
        status = ResponseStatus.from_status_code(response.status_code)
        if status is ResponseStatus.UNAUTHORIZED:
            raise UnauthorizedError()
        if status in (ResponseStatus.CLIENT_ERROR, ResponseStatus.SERVER_ERROR):
            raise GenericError(SERVER_ERROR_REASON)
        return decode(response.content, shape)

    def _failure(
        self,
        request: Optional[Request],
        response: Optional[Response],
        error: Exception,
    ) -> DataResponse[Any]:
        api_error = to_api_error(error)
        if api_error is not error:
            api_error.__cause__ = error
        return DataResponse(
            request=request,
            response=response,
            result=Failure(api_error),
            data=response.content if response is not None else None,
        )

    @staticmethod
    def _unwrap(envelope: DataResponse[T]) -> T:
        if isinstance(envelope.result, Failure):
            raise envelope.result.error
        return envelope.result.value

    # Observer

    def _notify_response(self, request: Request, response: Response) -> None:
        self._notify(
            DataResponse(
                request=request,
                response=response,
                result=Success(response),
                data=response.content,
            )
        )

    def _notify_transport_failure(self, request: Request, error: TransportError) -> None:
        self._notify(
            DataResponse(
                request=request,
                response=None,
                result=Failure(NetworkError(error)),
                data=None,
            )
        )

    def _notify(self, envelope: DataResponse[Any]) -> None:
        try:
            self._observer(envelope)
        except Exception:
            self._logger.warning("Response observer failed", exc_info=True)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self._logger.debug(
            f"Transport failure ({error!r}), retrying "
            f"(attempt {retry_state.attempt_number}/{self.MAX_RETRIES + 1})"
        )

    # Lifecycle

    def close(self) -> None:
        """Close the owned clients that were created.

        Owned clients are only built on first use, so a manager used through
        the blocking calls never opens an ``AsyncClient``. One that was opened
        needs ``aclose``.
        """
        if self._owns_client and self._client is not None:
            self._client.close()
        if self._owns_async_client and self._client_async is not None:
            if not self._client_async.is_closed:
                self._logger.warning(
                    "Owned AsyncClient is still open, use aclose() to close it"
                )

    async def aclose(self) -> None:
        if self._owns_async_client and self._client_async is not None:
            await self._client_async.aclose()
        if self._owns_client and self._client is not None:
            self._client.close()

    def __enter__(self) -> "NetworkManager":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "NetworkManager":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
