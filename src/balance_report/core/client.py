"""
Solana client abstraction for balance queries.
"""

from typing import Any

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solana.rpc.types import TokenAccountOpts
from solders.pubkey import Pubkey
from solders.rpc.responses import GetProgramAccountsWithContextMaybeJsonParsedResp

from balance_report.errors import RpcError
from balance_report.utils.logger import get_logger

logger = get_logger(__name__)


class SolanaClient:
    """Abstraction for Solana RPC client operations."""

    def __init__(self, rpc_endpoint: str):
        """Initialize Solana client with RPC endpoint.

        Args:
            rpc_endpoint: URL of the Solana RPC endpoint
        """
        self.rpc_endpoint = rpc_endpoint
        self._client = None

    async def __aenter__(self) -> "SolanaClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def get_client(self) -> AsyncClient:
        """Get or create the AsyncClient instance.

        Returns:
            AsyncClient instance
        """
        if self._client is None:
            self._client = AsyncClient(self.rpc_endpoint)
        return self._client

    async def close(self):
        """Close the client connection."""
        if self._client:
            await self._client.close()
            self._client = None

    async def get_balance(self, pubkey: Pubkey) -> int:
        """Get native balance in lamports.

        Raises:
            RpcError: transport or RPC failure
        """
        client = await self.get_client()
        try:
            response = await client.get_balance(pubkey)
        except (SolanaRpcException, RPCException) as e:
            raise RpcError(f"getBalance failed for {pubkey}: {e}") from e
        return int(response.value)

    async def get_token_accounts_by_owner(self, owner: Pubkey, mint: Pubkey) -> list[Any]:
        """Get all token accounts of `owner` for `mint`, jsonParsed encoding.

        The node falls back to base64 for accounts it cannot parse, which the
        strict jsonParsed response type rejects as a whole; the "maybe parsed"
        response has the same wire shape and keeps such accounts as bytes.

        Returns:
            Keyed accounts as returned by the node (account.data holds the
            parsed payload, or raw bytes if the node could not parse it)

        Raises:
            RpcError: transport or RPC failure
        """
        client = await self.get_client()
        try:
            body = client._get_token_accounts_by_owner_body(
                owner, TokenAccountOpts(mint=mint), None, "jsonParsed"
            )
            response = await client._provider.make_request(
                body, GetProgramAccountsWithContextMaybeJsonParsedResp
            )
        except (SolanaRpcException, RPCException) as e:
            raise RpcError(f"getTokenAccountsByOwner failed for {owner} / {mint}: {e}") from e
        accounts = list(response.value or [])
        logger.debug(f"[RPC] {owner} / {mint}: {len(accounts)} token accounts: {accounts!r}")
        return accounts
