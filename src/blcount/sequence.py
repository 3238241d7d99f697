from typing import Any, Iterator, Optional

from .errors import InvalidArgument, RankOutOfRange, check_non_negative
from .table import DEFAULT_INT_TYPE, CountTable
from .term import Term
from .unrank import _unrank, rank_with_table

__all__ = ["TermSequence", "enumerate_terms"]


class TermSequence:
    """
    All De Bruijn terms of size ``n`` with at most ``m`` free variables, in
    rank order.

    Indexing is 1-based and matches ranks: ``seq[k] == unrank(m, n, k)``.
    Every element is unranked on demand from the shared table, so iterating
    twice, or indexing while iterating, needs no reset.
    """

    def __init__(self, m: int, n: int, table: CountTable):
        check_non_negative(m=m, n=n)
        self.m = m
        self.n = n
        self.table = table
        self.length = table.count(m, n)

    def __repr__(self) -> str:
        return f"TermSequence(m={self.m}, n={self.n}, length={self.length})"

    def __len__(self) -> int:
        return self.length

    def get(self, k: int) -> Term:
        if not isinstance(k, int) or isinstance(k, bool):
            raise TypeError(f"sequence index must be an integer, got {k!r}")
        if not 1 <= k <= self.length:
            raise RankOutOfRange(k, self.length, self.m, self.n)
        return _unrank(self.m, self.n, k, self.table)

    __getitem__ = get

    def __iter__(self) -> Iterator[Term]:
        for k in range(1, self.length + 1):
            yield _unrank(self.m, self.n, k, self.table)

    def __reversed__(self) -> Iterator[Term]:
        for k in range(self.length, 0, -1):
            yield _unrank(self.m, self.n, k, self.table)

    def __contains__(self, term: Any) -> bool:
        if not isinstance(term, Term) or term.size() != self.n:
            return False
        try:
            rank_with_table(self.m, term, self.table)
        except InvalidArgument:
            return False
        return True

    def index(self, term: Term) -> int:
        """Rank of ``term`` in this sequence."""
        if term.size() != self.n:
            raise InvalidArgument(f"{term!r} has size {term.size()}, not {self.n}")
        return rank_with_table(self.m, term, self.table)


def enumerate_terms(m: int, n: int, int_type: Optional[Any] = None) -> TermSequence:
    """
    Sequence of all De Bruijn terms of size ``n`` with at most ``m`` free
    variables, over a table warmed up front.
    """
    table = CountTable(DEFAULT_INT_TYPE if int_type is None else int_type)
    return TermSequence(m, n, table)
