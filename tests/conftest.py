from typing import Generator
from unittest.mock import Mock

import pytest

from restpipe import Endpoint, HTTPHeaderField, NetworkManager
from restpipe._utils.constants import (
    ENV_DEBUG,
    ENV_FOLLOW_REDIRECTS,
    ENV_LOGGING_ENABLED,
    ENV_TIMEOUT,
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (ENV_TIMEOUT, ENV_FOLLOW_REDIRECTS, ENV_LOGGING_ENABLED, ENV_DEBUG):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def authority() -> str:
    return "api.example.com"


@pytest.fixture
def base_url(authority: str) -> str:
    return f"https://{authority}"


@pytest.fixture
def secret() -> str:
    return "secret-access-token-0123456789"


@pytest.fixture
def users_endpoint(authority: str, secret: str) -> Endpoint:
    return Endpoint(
        authority=authority,
        path="/v1/users/1",
        headers={
            HTTPHeaderField.ACCEPT: "application/json",
            HTTPHeaderField.AUTHORIZATION: f"Bearer {secret}",
        },
    )


@pytest.fixture
def observer() -> Mock:
    return Mock()


@pytest.fixture
def manager(observer: Mock) -> Generator[NetworkManager, None, None]:
    manager = NetworkManager(observer=observer)
    yield manager
    manager.close()
