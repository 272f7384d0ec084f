"""
Pytest fixtures for balance report tests
"""
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

import balance_report.utils.logger as logger_mod
from balance_report.core.client import SolanaClient


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop handlers added by setup_logging so tests don't leak them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logger_mod._file_handler_added = False


@pytest.fixture
def mock_solana_client():
    """Mock SolanaClient: 1 SOL, no token accounts."""
    client = MagicMock(spec=SolanaClient)
    client.get_balance = AsyncMock(return_value=1_000_000_000)
    client.get_token_accounts_by_owner = AsyncMock(return_value=[])
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_rpc_client():
    """Mock solana-py AsyncClient"""
    client = MagicMock()
    client.get_balance = AsyncMock(return_value=SimpleNamespace(value=1_000_000_000))
    # token accounts go through the raw body + provider path
    client._get_token_accounts_by_owner_body = MagicMock(
        side_effect=lambda owner, opts, commitment, encoding: SimpleNamespace(
            owner=owner, opts=opts, commitment=commitment, encoding=encoding
        )
    )
    client._provider.make_request = AsyncMock(return_value=SimpleNamespace(value=[]))
    client.close = AsyncMock()
    return client


@pytest.fixture
def patch_async_client(monkeypatch, mock_rpc_client):
    """Make SolanaClient build mock_rpc_client instead of a real AsyncClient."""
    factory = MagicMock(return_value=mock_rpc_client)
    monkeypatch.setattr("balance_report.core.client.AsyncClient", factory)
    return factory
