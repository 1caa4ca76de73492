"""
Pytest configuration and fixtures
"""

import os
import sys
from types import SimpleNamespace

import httpx
import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

REST_URL = "https://test.bitrix24.ru/rest/1/test-secret"


@pytest.fixture
def mock_get(mocker):
    """Spy для инжектируемого HTTP get: по умолчанию batch без ошибок"""
    return mocker.AsyncMock(
        return_value=SimpleNamespace(
            body={"result": {"result": {}, "result_error": []}}
        )
    )


@pytest.fixture
def make_http_client():
    """Factory для httpx клиента с MockTransport"""
    clients = []

    def factory(handler):
        client = httpx.AsyncClient(
            base_url=REST_URL,
            transport=httpx.MockTransport(handler)
        )
        clients.append(client)
        return client

    return factory
