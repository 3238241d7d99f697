"""
De Bruijn terms of the binary lambda calculus.

Variables carry 1-based De Bruijn indices, as in the binary encoding:
``Var(1)`` is bound by the immediately enclosing lambda, ``Var(2)`` by the
next one out, and so on. The binary size of a term is the length of its
encoding:

- ``Var(d)``   is encoded as ``1^d 0``           (size ``d + 1``)
- ``Lam(t)``   is encoded as ``00`` + ``t``       (size ``2 + size(t)``)
- ``App(f, x)`` is encoded as ``01`` + ``f`` + ``x`` (size ``2 + size(f) + size(x)``)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "Term",
    "Var",
    "Lam",
    "App",
    "Variable",
    "Abstraction",
    "Application",
]


class Term(ABC):
    """
    Base class for lambda calculus terms.

    Terms are immutable and compare structurally.
    """

    def __call__(self, arg: Term) -> Term:
        """Apply this term to an argument"""
        return App(self, arg)

    @abstractmethod
    def size(self) -> int:
        """Binary size of the term."""
        ...

    @abstractmethod
    def bits(self) -> str: ...

    @abstractmethod
    def free_bound(self, depth: int = 0) -> int:
        """
        Smallest number of free variables this term needs.

        A term belongs to the class "at most m free variables" exactly
        when ``free_bound() <= m``.

        ```
        Lam(Var(1)).free_bound()       # 0, closed
        Lam(Var(2)).free_bound()       # 1
        App(Var(3), Var(1)).free_bound()  # 3
        ```
        """
        ...

    def is_valid(self, m: int) -> bool:
        """Check if the term uses at most ``m`` free variables."""
        return self.free_bound() <= m

    def is_closed(self) -> bool:
        return self.free_bound() == 0


@dataclass(frozen=True)
class Var(Term):
    """
    A variable reference by 1-based De Bruijn index.

    Example:
        λx. x      =>  Lam(Var(1))
        λx. λy. x  =>  Lam(Lam(Var(2)))

    Attributes:
        index: how many binders to cross, counting the nearest one as 1
    """

    index: int

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Variable index must be non-negative, got {self.index}")

    def size(self) -> int:
        return self.index + 1

    def bits(self) -> str:
        return "1" * self.index + "0"

    def free_bound(self, depth: int = 0) -> int:
        return max(0, self.index - depth)


@dataclass(frozen=True)
class Lam(Term):
    """
    Lambda abstraction.

    The body may reference this binder with ``Var(1)``; every free variable
    of the body sees one more binder.

    Attributes:
        body: The body of the lambda abstraction
    """

    body: Term

    def size(self) -> int:
        return 2 + self.body.size()

    def bits(self) -> str:
        return "00" + self.body.bits()

    def free_bound(self, depth: int = 0) -> int:
        return self.body.free_bound(depth + 1)


@dataclass(frozen=True)
class App(Term):
    """
    Function application.

    Example:
        (λx. x) y  =>  App(Lam(Var(1)), Var(1))

    Attributes:
        func: The function being applied
        arg: The argument to apply
    """

    func: Term
    arg: Term

    @property
    def left(self) -> Term:
        return self.func

    @property
    def right(self) -> Term:
        return self.arg

    def size(self) -> int:
        return 2 + self.func.size() + self.arg.size()

    def bits(self) -> str:
        return "01" + self.func.bits() + self.arg.bits()

    def free_bound(self, depth: int = 0) -> int:
        return max(self.func.free_bound(depth), self.arg.free_bound(depth))


Variable = Var
Abstraction = Lam
Application = App
