# Coin Change (minimum coins) - Python
# Tabulates over amounts and keeps the last coin used so the multiset can be rebuilt.

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from dp_engine.config import Limits, default_limits
from dp_engine.validation import reject, require_int

logger = logging.getLogger(__name__)

# Marks an amount no combination of the denominations can reach.
UNREACHABLE = None

US_COINS: Tuple[int, ...] = (1, 5, 10, 25)  # penny, nickel, dime, quarter
DEFAULT_TARGET = 23

_COIN_NAMES = {1: "Penny", 5: "Nickel", 10: "Dime", 25: "Quarter"}


def coin_name(value: int) -> str:
    return _COIN_NAMES.get(value, f"{value}¢")


@dataclass(frozen=True, slots=True)
class CoinChangeResult:
    denominations: Tuple[int, ...]
    target: int
    min_coins: Optional[int]
    # None when the target is unreachable
    coin_counts: Optional[Tuple[Tuple[int, int], ...]]
    table: Tuple[Optional[int], ...]
    last_coin: Tuple[Optional[int], ...]

    @property
    def counts(self) -> Optional[Mapping[int, int]]:
        """Read-only denomination -> count view, in denomination order."""
        if self.coin_counts is None:
            return None
        return MappingProxyType(dict(self.coin_counts))

    @property
    def reachable(self) -> bool:
        return self.min_coins is not UNREACHABLE

    def coins_used(self) -> List[int]:
        """Coins in the order the reconstruction walk takes them, largest amount first."""
        if not self.reachable:
            return []
        coins = []
        amount = self.target
        while amount > 0:
            coins.append(self.last_coin[amount])
            amount -= self.last_coin[amount]
        return coins

    def to_dict(self, include_table: bool = True) -> dict:
        d: dict = {
            "denominations": list(self.denominations),
            "target": self.target,
            "min_coins": self.min_coins,
            "counts": None if self.counts is None else {str(k): v for k, v in self.counts.items()},
        }
        if include_table:
            d["table"] = list(self.table)
        return d


def _validate_denominations(denominations: Iterable[int]) -> Tuple[int, ...]:
    coins = tuple(denominations)
    for coin in coins:
        require_int("denomination", coin, minimum=1)
    if len(set(coins)) != len(coins):
        reject(f"denominations must be distinct, got {list(coins)}")
    return coins


def coin_change_solve(
    denominations: Iterable[int],
    target: int,
    *,
    limits: Optional[Limits] = None,
) -> CoinChangeResult:
    """
    Minimum coins needed to make target
    Time: O(target * len(denominations)), Space: O(target)

    The first denomination, in caller order, that reaches the minimum for an
    amount is the one recorded; later equal options do not replace it.
    An unreachable target yields ``min_coins=None`` and ``counts=None``.
    """
    limits = limits or default_limits()
    require_int("target", target, 0, limits.max_target)
    coins = _validate_denominations(denominations)

    dp: List[Optional[int]] = [UNREACHABLE] * (target + 1)
    last_coin: List[Optional[int]] = [None] * (target + 1)
    dp[0] = 0

    for amount in range(1, target + 1):
        for coin in coins:
            if coin > amount or dp[amount - coin] is UNREACHABLE:
                continue
            if dp[amount] is UNREACHABLE or dp[amount - coin] + 1 < dp[amount]:
                dp[amount] = dp[amount - coin] + 1
                last_coin[amount] = coin

    counts: Optional[Dict[int, int]] = None
    if dp[target] is not UNREACHABLE:
        counts = {coin: 0 for coin in coins}
        amount = target
        while amount > 0:
            counts[last_coin[amount]] += 1
            amount -= last_coin[amount]

    logger.debug("coin change: target %d with %s -> %s", target, coins, dp[target])
    return CoinChangeResult(
        denominations=coins,
        target=target,
        min_coins=dp[target],
        coin_counts=None if counts is None else tuple(counts.items()),
        table=tuple(dp),
        last_coin=tuple(last_coin),
    )


def coin_breakdown(result: CoinChangeResult) -> List[dict]:
    """Named non-zero coin counts, in denomination order."""
    if result.counts is None:
        return []
    return [
        {"name": coin_name(coin), "denomination": coin, "count": count}
        for coin, count in result.counts.items()
        if count > 0
    ]


# Example usage
if __name__ == "__main__":
    result = coin_change_solve(US_COINS, DEFAULT_TARGET)
    print(f"Min coins: {result.min_coins}")
    for row in coin_breakdown(result):
        print(f"  {row['count']} x {row['name']}")
