from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from .models import TokenHolder

MICRO_LAMPORTS_PER_LAMPORT = 1_000_000


@dataclass
class TopHolderStats:
    total_holders: int = 0
    top_holders: List[TokenHolder] = field(default_factory=list)
    top_holders_balance: int = 0
    top_holders_percent: float = 0.0
    total_supply: int = 0


def calculate_top_holder_stats(holders: Sequence[TokenHolder], top_n: int) -> TopHolderStats:
    """Concentration of the first ``top_n`` holders.

    Holders are expected sorted by balance descending, as the API returns
    them. ``total_supply`` is the sum over the holders given, not the mint's
    on-chain supply.
    """
    if not holders:
        return TopHolderStats()
    total_supply = sum(h.balance for h in holders)
    top = list(holders[:max(top_n, 0)])
    top_balance = sum(h.balance for h in top)
    percent = top_balance / total_supply * 100 if total_supply > 0 else 0.0
    return TopHolderStats(
        total_holders=len(holders),
        top_holders=top,
        top_holders_balance=top_balance,
        top_holders_percent=percent,
        total_supply=total_supply,
    )


def calculate_priority_fee(compute_units: int, micro_lamports_per_cu: float) -> int:
    """Priority fee in lamports: compute_units * price / 1e6, truncated."""
    return int(compute_units * micro_lamports_per_cu / MICRO_LAMPORTS_PER_LAMPORT)
