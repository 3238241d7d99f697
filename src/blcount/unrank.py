"""
Unranking and ranking of De Bruijn terms.

Ranks are 1-based. Within a class ``(m, n)`` the order follows the case
split of the recurrence in :mod:`blcount.table`:

1. abstractions first, in the order of their bodies in ``(m + 1, n - 2)``;
2. then applications, grouped by the size ``j = 0, 1, ...`` of the function
   part, each group enumerating ``(func rank, arg rank)`` pairs with the
   argument rank varying fastest;
3. the variable ``Var(n - 1)`` last, when ``m >= n - 1``.
"""

import random
from typing import Any, Optional

from .errors import InvalidArgument, RankOutOfRange, check_non_negative
from .table import DEFAULT_INT_TYPE, CountTable
from .term import App, Lam, Term, Var

__all__ = ["unrank", "unrank_with_table", "rank", "rank_with_table", "random_term"]


def unrank_with_table(m: int, n: int, k: int, table: CountTable) -> Term:
    """
    The ``k``-th De Bruijn term of binary size ``n`` with at most ``m`` free
    variables, using counts from ``table``.

    Use this for repeated unrankings so the counts are only computed once.
    """
    check_non_negative(m=m, n=n, k=k)
    if k < 1:
        raise InvalidArgument(f"k must be at least 1, got {k}")
    total = table.count(m, n)
    if k > total:
        raise RankOutOfRange(k, total, m, n)
    return _unrank(m, n, k, table)


def _unrank(m: int, n: int, k: int, table: CountTable) -> Term:
    if m >= n - 1 and k == table.count(m, n):
        return Var(n - 1)

    abstractions = table.count(m + 1, n - 2)
    if k <= abstractions:
        return Lam(_unrank(m + 1, n - 2, k, table))

    r = k - abstractions
    n = n - 2
    j = 0
    while True:
        args = table.count(m, n - j)
        block = table.count(m, j) * args
        if r <= block:
            func_rank, arg_rank = divmod(r - 1, args)
            return App(
                _unrank(m, j, func_rank + 1, table),
                _unrank(m, n - j, arg_rank + 1, table),
            )
        r -= block
        j += 1


def unrank(m: int, n: int, k: int, int_type: Optional[Any] = None) -> Term:
    """
    The ``k``-th De Bruijn term of binary size ``n`` with at most ``m`` free
    variables (ranks start at 1).
    """
    check_non_negative(m=m, n=n, k=k)
    table = CountTable(DEFAULT_INT_TYPE if int_type is None else int_type)
    return unrank_with_table(m, n, k, table)


def rank_with_table(m: int, term: Term, table: CountTable) -> int:
    """Inverse of :func:`unrank_with_table`: the rank of ``term`` in class ``(m, term.size())``."""
    check_non_negative(m=m)
    if not term.is_valid(m):
        raise InvalidArgument(f"{term!r} needs more than {m} free variables")
    return _rank(m, term, table)


def _rank(m: int, term: Term, table: CountTable) -> int:
    n = term.size()
    if isinstance(term, Var):
        if term.index < 1:
            raise InvalidArgument("Var(0) has no binary encoding")
        return table.count(m, n)
    if isinstance(term, Lam):
        return _rank(m + 1, term.body, table)
    if isinstance(term, App):
        j = term.func.size()
        offset = table.count(m + 1, n - 2)
        for i in range(j):
            offset += table.count(m, i) * table.count(m, n - 2 - i)
        args = table.count(m, n - 2 - j)
        return (
            offset
            + (_rank(m, term.func, table) - 1) * args
            + _rank(m, term.arg, table)
        )
    raise TypeError(f"not a term: {term!r}")


def rank(m: int, term: Term, int_type: Optional[Any] = None) -> int:
    table = CountTable(DEFAULT_INT_TYPE if int_type is None else int_type)
    return rank_with_table(m, term, table)


def random_term(
    m: int,
    n: int,
    rng: Optional[random.Random] = None,
    table: Optional[CountTable] = None,
) -> Term:
    """Draw a term uniformly from class ``(m, n)``."""
    check_non_negative(m=m, n=n)
    if rng is None:
        rng = random.Random()
    if table is None:
        table = CountTable()
    total = table.count(m, n)
    if total == 0:
        raise RankOutOfRange(1, 0, m, n)
    return _unrank(m, n, rng.randint(1, total), table)
