# 0/1 Knapsack - Python
# Bottom-up tabulation plus a backtracking pass that recovers the chosen items.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from dp_engine.config import Limits, default_limits
from dp_engine.dynamic_programming.table import Table
from dp_engine.validation import reject, require_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Item:
    id: int
    name: str
    weight: int
    value: int

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        try:
            return cls(
                id=data["id"],
                name=str(data["name"]),
                weight=data["weight"],
                value=data["value"],
            )
        except KeyError as exc:
            reject(f"item is missing field {exc.args[0]!r}")

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "weight": self.weight, "value": self.value}


DEFAULT_ITEMS: Tuple[Item, ...] = (
    Item(1, "Diamond Ring", 1, 100),
    Item(2, "Gold Watch", 4, 40),
    Item(3, "Silver Necklace", 6, 30),
    Item(4, "Laptop", 8, 50),
    Item(5, "Camera", 2, 20),
    Item(6, "Painting", 10, 60),
    Item(7, "Antique Vase", 5, 35),
    Item(8, "Book Collection", 15, 25),
)
DEFAULT_CAPACITY = 50


@dataclass(frozen=True, slots=True)
class KnapsackResult:
    capacity: int
    max_value: int
    selected: Tuple[Item, ...]
    table: Tuple[Tuple[int, ...], ...]

    @property
    def total_weight(self) -> int:
        return sum(item.weight for item in self.selected)

    @property
    def utilization(self) -> float:
        """Percent of capacity filled by the selection."""
        if self.capacity == 0:
            return 0.0
        return self.total_weight / self.capacity * 100

    def to_dict(self, include_table: bool = True) -> dict:
        d: dict = {
            "capacity": self.capacity,
            "max_value": self.max_value,
            "total_weight": self.total_weight,
            "selected": [item.to_dict() for item in self.selected],
        }
        if include_table:
            d["table"] = [list(row) for row in self.table]
        return d


def _validate_items(items: Sequence[Item]) -> None:
    seen = set()
    for item in items:
        if not isinstance(item, Item):
            reject(f"expected Item, got {type(item).__name__}")
        if item.id in seen:
            reject(f"duplicate item id {item.id}")
        seen.add(item.id)
        require_int(f"weight of item {item.id}", item.weight, minimum=1)
        require_int(f"value of item {item.id}", item.value, minimum=1)


def knapsack_solve(
    items: Sequence[Item],
    capacity: int,
    *,
    limits: Optional[Limits] = None,
) -> KnapsackResult:
    """
    0/1 Knapsack Problem
    Time: O(n * capacity), Space: O(n * capacity)

    Args:
        items: Candidate items, each usable at most once
        capacity: Knapsack capacity

    Returns:
        KnapsackResult; ``selected`` keeps the original item order.
        When taking an item would not raise the optimum, it is left out.
    """
    limits = limits or default_limits()
    items = tuple(items)
    require_int("capacity", capacity, 0, limits.max_capacity)
    _validate_items(items)

    n = len(items)
    dp = Table(n + 1, capacity + 1)

    for i in range(1, n + 1):
        weight, value = items[i - 1].weight, items[i - 1].value
        for w in range(1, capacity + 1):
            # Don't take item i-1
            dp[i, w] = dp[i - 1, w]

            # Take item i-1 if it fits and strictly helps
            if weight <= w and dp[i - 1, w - weight] + value > dp[i, w]:
                dp[i, w] = dp[i - 1, w - weight] + value

    selected: List[Item] = []
    i, w = n, capacity
    while i > 0 and w > 0:
        if dp[i, w] != dp[i - 1, w]:
            selected.append(items[i - 1])
            w -= items[i - 1].weight
        i -= 1
    selected.reverse()

    logger.debug(
        "knapsack: %d items, capacity %d -> value %d with %d selected",
        n, capacity, dp[n, capacity], len(selected),
    )
    return KnapsackResult(
        capacity=capacity,
        max_value=dp[n, capacity],
        selected=tuple(selected),
        table=dp.freeze(),
    )


def item_breakdown(items: Sequence[Item], result: KnapsackResult) -> List[dict]:
    """Per-item rows with value/weight ratio and whether the item was picked."""
    chosen = {item.id for item in result.selected}
    return [
        {
            "id": item.id,
            "name": item.name,
            "weight": item.weight,
            "value": item.value,
            "ratio": item.value / item.weight,
            "selected": item.id in chosen,
        }
        for item in items
    ]


# Example usage
if __name__ == "__main__":
    result = knapsack_solve(DEFAULT_ITEMS, DEFAULT_CAPACITY)
    print(f"Max knapsack value: {result.max_value}")
    for item in result.selected:
        print(f"  {item.name} (w={item.weight}, v={item.value})")
