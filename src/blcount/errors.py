from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class BlcountError(Exception):
    """Base class of every error raised by blcount."""


@dataclass(eq=False)
class InvalidArgument(BlcountError, ValueError):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class RankOutOfRange(BlcountError, IndexError):
    rank: int
    count: int
    m: int | None = None
    n: int | None = None

    def __str__(self) -> str:
        where = "" if self.m is None else f" for m={self.m}, n={self.n}"
        return f"rank {self.rank} outside [1, {self.count}]{where}"


@dataclass(eq=False)
class NumericOverflow(BlcountError, OverflowError):
    m: int
    n: int
    dtype: Any
    value: int

    def __str__(self) -> str:
        return (
            f"S({self.m},{self.n}) = {self.value} does not fit in {self.dtype}; "
            "bound n or count with int_type=int"
        )


def check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgument(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidArgument(f"{name} must be non-negative, got {value}")


__all__ = [
    "BlcountError",
    "InvalidArgument",
    "RankOutOfRange",
    "NumericOverflow",
    "check_non_negative",
]
