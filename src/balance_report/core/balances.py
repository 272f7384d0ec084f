"""
Balance fetcher - SOL and SPL token balances per wallet.

Queries run strictly one after another on a single client. Any decode or RPC
error aborts the whole run; only token accounts whose data can't be read as
jsonParsed are skipped, with a warning.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from solders.pubkey import Pubkey

from balance_report.config_loader import TokenConfig, TokenInfo
from balance_report.core.client import SolanaClient
from balance_report.errors import AddressDecodeError
from balance_report.utils.logger import get_logger
from balance_report.utils.token_math import lamports_to_sol, sum_ui_amounts

logger = get_logger(__name__)


@dataclass
class BalanceResult:
    """Balances of one wallet, in display units."""
    sol_balance: float
    token_balances: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RawAccountAmount:
    """uiAmount pulled out of a jsonParsed token account (None if the node sent null)."""
    ui_amount: Optional[float]


def parse_pubkey(address: str) -> Pubkey:
    """Decode a base58 address.

    Raises:
        AddressDecodeError: not a valid 32-byte base58 key
    """
    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        raise AddressDecodeError(address, str(e)) from e


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def parse_account_amount(keyed_account: Any) -> Optional[RawAccountAmount]:
    """Extract tokenAmount.uiAmount from a keyed account.

    Accepts both solders response objects and plain dicts. Returns None when
    the account data is not in the jsonParsed shape
    {parsed: {info: {tokenAmount: {uiAmount: number|null}}}}.
    """
    data = _get(_get(keyed_account, "account"), "data")
    if data is None or isinstance(data, (bytes, bytearray, str, list, tuple)):
        # binary encodings come back as bytes or ["<b64>", "base64"]
        return None

    parsed = _get(data, "parsed")
    if isinstance(parsed, str):
        try:
            parsed = json.loads(parsed)
        except ValueError:
            return None
    if not isinstance(parsed, dict):
        return None

    info = parsed.get("info")
    token_amount = info.get("tokenAmount") if isinstance(info, dict) else None
    if not isinstance(token_amount, dict):
        return None

    ui_amount = token_amount.get("uiAmount")
    if ui_amount is None:
        return RawAccountAmount(ui_amount=None)
    if isinstance(ui_amount, bool) or not isinstance(ui_amount, (int, float)):
        return None
    return RawAccountAmount(ui_amount=float(ui_amount))


def _account_key(keyed_account: Any) -> str:
    key = _get(keyed_account, "pubkey")
    return str(key) if key is not None else "<unknown>"


async def get_token_balances(
    client: SolanaClient,
    wallet_pubkey: Pubkey,
    tokens: Sequence[TokenInfo],
) -> dict[str, float]:
    """Summed UI balance per ticker for one wallet.

    Tickers with no token accounts get 0.0. A repeated ticker keeps the
    value of its last occurrence.
    """
    token_balances: dict[str, float] = {}

    for token in tokens:
        mint_pubkey = parse_pubkey(token.address)
        accounts = await client.get_token_accounts_by_owner(wallet_pubkey, mint_pubkey)

        amounts = []
        for account in accounts:
            raw = parse_account_amount(account)
            if raw is None:
                logger.warning(
                    f"[BALANCE] {wallet_pubkey} {token.ticker}: skipping token account "
                    f"{_account_key(account)}, data is not jsonParsed"
                )
                continue
            amounts.append(raw.ui_amount)

        token_balances[token.ticker] = sum_ui_amounts(amounts)
        logger.debug(f"[BALANCE] {wallet_pubkey} {token.ticker} = {token_balances[token.ticker]}")

    return token_balances


async def get_wallet_balances(
    config: TokenConfig,
    client: Optional[SolanaClient] = None,
) -> dict[str, BalanceResult]:
    """Fetch balances for every configured wallet, in config order.

    Args:
        config: loaded configuration
        client: client to use; one is created for config.solana_rpc_url and
            closed afterwards when not given

    Raises:
        AddressDecodeError: a wallet or mint address is malformed
        RpcError: any RPC call failed
    """
    owns_client = client is None
    if client is None:
        client = SolanaClient(config.solana_rpc_url)

    results: dict[str, BalanceResult] = {}
    try:
        for wallet_str in config.wallets:
            wallet_pubkey = parse_pubkey(wallet_str)

            lamports = await client.get_balance(wallet_pubkey)
            token_balances = await get_token_balances(client, wallet_pubkey, config.tokens)

            results[wallet_str] = BalanceResult(
                sol_balance=lamports_to_sol(lamports),
                token_balances=token_balances,
            )
            logger.info(f"[BALANCE] {wallet_str}: {lamports} lamports, {len(token_balances)} tokens")
    finally:
        if owns_client:
            await client.close()

    return results
