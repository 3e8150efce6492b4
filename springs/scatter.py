"""springs.scatter
===================

Counting helper for the resolver: how many ways can ``n`` interchangeable
slack cells be spread over ``m`` ordered gap slots? The answer is the number
of weak compositions of ``n`` into ``m`` parts, ``C(n + m - 1, m - 1)``, but
the resolver asks for the same handful of ``(n, m)`` pairs over and over, so
the values are built by the stars-and-bars recurrence and cached.

One :class:`Scatter` belongs to one ``arrangements`` call. It is handed down
the recursion explicitly instead of living in a module global so that rows
solved in parallel workers never share state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass
class Scatter:
    """Memoised slack distribution counter."""

    cache: Dict[Tuple[int, int], int] = field(default_factory=dict)

    def count(self, n: int, m: int) -> int:
        """Ways to distribute ``n`` slack units over ``m`` slots.

        A single slot absorbs everything and no slack leaves only the empty
        distribution, so both cases are 1. Otherwise the first slot takes
        ``t`` units and the remaining ``m - 1`` slots share the rest.
        """

        if m < 1:
            raise ValueError(f"slot count must be positive, got {m}")
        if n == 0 or m == 1:
            return 1
        key = (n, m)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        result = sum(self.count(n - taken, m - 1) for taken in range(n + 1))
        self.cache[key] = result
        return result


__all__ = ["Scatter"]
