"""Plain-text balance report."""

import sys
from typing import Mapping, TextIO

from balance_report.core.balances import BalanceResult

HEADER = "Detailed Wallet Balances:"


def format_wallet(wallet: str, balance: BalanceResult) -> list[str]:
    lines = [
        f"Wallet: {wallet}",
        f"SOL Balance: {balance.sol_balance:.4f} SOL",
        "Token Balances:",
    ]
    for ticker, amount in balance.token_balances.items():
        lines.append(f"  {ticker}: {amount:.4f}")
    lines.append("")
    return lines


def format_report(results: Mapping[str, BalanceResult]) -> str:
    """Render all wallets, in mapping order, with 4 decimal places."""
    lines = [HEADER]
    for wallet, balance in results.items():
        lines.extend(format_wallet(wallet, balance))
    return "\n".join(lines) + "\n"


def print_report(results: Mapping[str, BalanceResult], stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    out.write(format_report(results))
    out.flush()
