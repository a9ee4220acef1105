# Longest Common Subsequence (LCS) - Python

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from dp_engine.dynamic_programming.table import Table
from dp_engine.validation import reject

logger = logging.getLogger(__name__)

DEFAULT_FIRST = "AGGTAB"
DEFAULT_SECOND = "GXTXAYB"


@dataclass(frozen=True, slots=True)
class LcsResult:
    first: str
    second: str
    lcs: str
    length: int
    table: Tuple[Tuple[int, ...], ...]
    # (i, j): lcs[k] == first[i] == second[j], both indices increasing
    path: Tuple[Tuple[int, int], ...]

    @property
    def similarity(self) -> float:
        longest = max(len(self.first), len(self.second))
        if longest == 0:
            return 0.0
        return self.length / longest * 100

    def to_dict(self, include_table: bool = True) -> dict:
        d: dict = {
            "lcs": self.lcs,
            "length": self.length,
            "similarity": round(self.similarity, 1),
            "path": [{"i": i, "j": j} for i, j in self.path],
        }
        if include_table:
            d["table"] = [list(row) for row in self.table]
        return d


def _as_text(name: str, seq: Sequence[str]) -> str:
    if isinstance(seq, str):
        return seq
    if not isinstance(seq, (list, tuple)) or not all(isinstance(ch, str) and len(ch) == 1 for ch in seq):
        reject(f"{name} must be a string or a sequence of single characters")
    return "".join(seq)


def lcs_solve(a: Sequence[str], b: Sequence[str]) -> LcsResult:
    """
    Longest Common Subsequence (LCS)
    Time: O(m * n), Space: O(m * n)

    On a tie while backtracking the second string is consumed first.
    """
    s1, s2 = _as_text("a", a), _as_text("b", b)
    m, n = len(s1), len(s2)
    dp = Table(m + 1, n + 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i, j] = dp[i - 1, j - 1] + 1
            else:
                dp[i, j] = max(dp[i - 1, j], dp[i, j - 1])

    chars: List[str] = []
    path: List[Tuple[int, int]] = []
    i, j = m, n
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            path.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1, j] > dp[i, j - 1]:
            i -= 1
        else:
            j -= 1
    chars.reverse()
    path.reverse()

    logger.debug("lcs(%d, %d chars) -> length %d", m, n, dp[m, n])
    return LcsResult(
        first=s1,
        second=s2,
        lcs="".join(chars),
        length=dp[m, n],
        table=dp.freeze(),
        path=tuple(path),
    )


# Example usage
if __name__ == "__main__":
    result = lcs_solve(DEFAULT_FIRST, DEFAULT_SECOND)
    print(f"LCS: {result.lcs} (length {result.length})")
