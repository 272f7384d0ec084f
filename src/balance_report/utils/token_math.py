"""Token math utilities - lamport conversion and UI amount sums."""
from typing import Iterable, Optional

LAMPORTS_PER_SOL = 1_000_000_000


def lamports_to_sol(lamports: int) -> float:
    return lamports / LAMPORTS_PER_SOL


def sum_ui_amounts(amounts: Iterable[Optional[float]]) -> float:
    """Sum UI amounts, ignoring accounts that reported none."""
    total = 0.0
    for amount in amounts:
        if amount is None:
            continue
        total += amount
    return total
