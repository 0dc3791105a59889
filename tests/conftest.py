"""
Pytest configuration and fixtures for the AdWords client tests.
Provides a canned SOAP server on top of httpx.MockTransport.
"""

from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio  # type: ignore

from adapters.adwords.client import AdWordsClient
from config.adwords_config import AdWordsConfig
from core.infrastructure.http_client import close_http_client, init_http_client
from soap_helpers import FakeSoapServer


@pytest.fixture
def adwords_config() -> AdWordsConfig:
    return AdWordsConfig(
        developer_token="dev-token-123",
        client_customer_id="123-456-7890",
        user_agent="tests",
        access_token="access-token-abc",
        retry_base_delay=0,
    )


@pytest_asyncio.fixture
async def soap_server() -> AsyncGenerator[FakeSoapServer, None]:
    server = FakeSoapServer()
    init_http_client(transport=httpx.MockTransport(server.handler))
    yield server
    await close_http_client()


@pytest.fixture
def adwords_client(adwords_config: AdWordsConfig) -> AdWordsClient:
    return AdWordsClient(adwords_config)


@pytest.fixture
def make_client(adwords_config: AdWordsConfig) -> Callable[..., AdWordsClient]:
    def _make(**overrides) -> AdWordsClient:
        return AdWordsClient(adwords_config.with_overrides(**overrides))

    return _make
