"""Core blockchain functionality."""

from balance_report.core.client import SolanaClient
from balance_report.core.balances import (
    BalanceResult,
    RawAccountAmount,
    get_token_balances,
    get_wallet_balances,
    parse_account_amount,
    parse_pubkey,
)

__all__ = [
    # RPC client
    "SolanaClient",
    # Balances
    "BalanceResult",
    "RawAccountAmount",
    "get_token_balances",
    "get_wallet_balances",
    "parse_account_amount",
    "parse_pubkey",
]
