"""
Memoized counting of De Bruijn terms.

``S(m, n)`` is the number of terms of binary size ``n`` with at most ``m``
free variables (Grygiel & Lescanne, "Counting and generating terms in the
binary lambda calculus", https://arxiv.org/abs/1511.05334)::

    S(m, 0) = S(m, 1) = 0
    S(m, n) = [m >= n - 1] + S(m + 1, n - 2) + sum_{j=0}^{n-2} S(m, j) S(m, n - 2 - j)

Counts grow exponentially in ``n``. Counting with ``int_type=int`` never
overflows; with a fixed-width polars dtype it is up to the caller to keep
``n`` small enough, and a count that does not fit raises ``NumericOverflow``.
"""

import logging
from typing import Any, Optional

import polars as pl

from .errors import InvalidArgument, NumericOverflow, check_non_negative

__all__ = ["CountTable", "count", "count_with_table", "DEFAULT_INT_TYPE"]

logger = logging.getLogger(__name__)

DEFAULT_INT_TYPE = int

_BOUNDS = {
    pl.Int8: (-(1 << 7), (1 << 7) - 1),
    pl.Int16: (-(1 << 15), (1 << 15) - 1),
    pl.Int32: (-(1 << 31), (1 << 31) - 1),
    pl.Int64: (-(1 << 63), (1 << 63) - 1),
    pl.UInt8: (0, (1 << 8) - 1),
    pl.UInt16: (0, (1 << 16) - 1),
    pl.UInt32: (0, (1 << 32) - 1),
    pl.UInt64: (0, (1 << 64) - 1),
}


def _normalize_int_type(int_type: Any):
    if int_type is int:
        return int
    if isinstance(int_type, pl.DataType):
        int_type = type(int_type)
    if int_type in _BOUNDS:
        return int_type
    raise InvalidArgument(
        f"int_type must be int or a polars integer dtype, got {int_type!r}"
    )


class CountTable:
    """
    Sparse, append-only cache of ``S(m, n)``.

    :meth:`count` is the only way entries get written: it returns the cached
    value or computes it through the same table. Once written, an entry never
    changes. The unranker and :class:`~blcount.sequence.TermSequence` borrow a
    table; to drop the cache, drop the table.
    """

    def __init__(self, int_type: Any = DEFAULT_INT_TYPE):
        self.int_type = _normalize_int_type(int_type)
        self._bounds = _BOUNDS.get(self.int_type)
        self._values: dict[tuple[int, int], int] = {}

    def __repr__(self) -> str:
        return f"CountTable(int_type={self.int_type!r}, entries={len(self._values)})"

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: tuple[int, int]) -> bool:
        return key in self._values

    def count(self, m: int, n: int) -> int:
        """Return ``S(m, n)``, computing and caching it if absent."""
        check_non_negative(m=m, n=n)
        value = self._values.get((m, n))
        if value is None:
            self._warm(m, n)
            value = self._values[m, n]
        return value

    def _warm(self, m: int, n: int) -> None:
        # Fill every entry S(m, n) depends on, smallest sizes first, so that
        # each _compute only ever reads entries that are already cached.
        logger.debug(f"warming count table for m={m}, n={n}")
        for size in range(n + 1):
            for bound in range(m, m + (n - size) // 2 + 1):
                if (bound, size) not in self._values:
                    self._store(bound, size, self._compute(bound, size))

    def _lookup(self, m: int, n: int) -> int:
        value = self._values.get((m, n))
        if value is None:
            value = self._compute(m, n)
            self._store(m, n, value)
        return value

    def _compute(self, m: int, n: int) -> int:
        if n <= 1:
            return 0
        lookup = self._lookup
        return (
            int(m >= n - 1)
            + lookup(m + 1, n - 2)
            + sum(lookup(m, j) * lookup(m, n - 2 - j) for j in range(n - 1))
        )

    def _store(self, m: int, n: int, value: int) -> None:
        if self._bounds is not None and not (
            self._bounds[0] <= value <= self._bounds[1]
        ):
            logger.debug(f"S({m},{n}) overflows {self.int_type}")
            raise NumericOverflow(m, n, self.int_type, value)
        self._values[m, n] = value

    def _count_dtype(self):
        return pl.Object if self.int_type is int else self.int_type

    def to_frame(self) -> pl.DataFrame:
        """All cached entries as a DataFrame with columns ``m``, ``n``, ``count``."""
        rows = sorted(self._values.items())
        return pl.DataFrame(
            {
                "m": [m for (m, _), _ in rows],
                "n": [n for (_, n), _ in rows],
                "count": [value for _, value in rows],
            },
            schema={"m": pl.UInt32, "n": pl.UInt32, "count": self._count_dtype()},
        )

    def to_matrix(self, m: int, n: int) -> pl.DataFrame:
        """
        Dense view of ``S`` for sizes ``0..n`` and bounds ``0..m``.

        One row per size, one column ``"m=<bound>"`` per free-variable bound;
        missing entries are computed through :meth:`count`.
        """
        check_non_negative(m=m, n=n)
        columns: dict[str, Any] = {"n": list(range(n + 1))}
        schema: dict[str, Any] = {"n": pl.UInt32}
        for bound in range(m + 1):
            name = f"m={bound}"
            columns[name] = [self.count(bound, size) for size in range(n + 1)]
            schema[name] = self._count_dtype()
        return pl.DataFrame(columns, schema=schema)


def count_with_table(m: int, n: int, table: CountTable) -> int:
    """
    Number of De Bruijn terms of binary size ``n`` with at most ``m`` free
    variables, reading and filling ``table``.

    Use this instead of :func:`count` when calling repeatedly.
    """
    return table.count(m, n)


def count(m: int, n: int, int_type: Optional[Any] = None) -> int:
    """Number of De Bruijn terms of binary size ``n`` with at most ``m`` free variables."""
    check_non_negative(m=m, n=n)
    table = CountTable(DEFAULT_INT_TYPE if int_type is None else int_type)
    return table.count(m, n)
