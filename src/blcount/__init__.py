"""
Counting and unranking De Bruijn terms of the binary lambda calculus by size.

```
>>> from blcount import count, unrank, enumerate_terms
>>> count(0, 8)
2
>>> unrank(0, 8, 2)
Lam(body=App(func=Var(index=1), arg=Var(index=1)))
>>> len(enumerate_terms(0, 10))
6
```
"""

from .errors import BlcountError, InvalidArgument, NumericOverflow, RankOutOfRange
from .sequence import TermSequence, enumerate_terms
from .table import DEFAULT_INT_TYPE, CountTable, count, count_with_table
from .term import Abstraction, App, Application, Lam, Term, Var, Variable
from .unrank import random_term, rank, rank_with_table, unrank, unrank_with_table

__all__ = [
    "count",
    "count_with_table",
    "unrank",
    "unrank_with_table",
    "rank",
    "rank_with_table",
    "random_term",
    "enumerate_terms",
    "CountTable",
    "TermSequence",
    "DEFAULT_INT_TYPE",
    "Term",
    "Var",
    "Lam",
    "App",
    "Variable",
    "Abstraction",
    "Application",
    "BlcountError",
    "InvalidArgument",
    "RankOutOfRange",
    "NumericOverflow",
]
