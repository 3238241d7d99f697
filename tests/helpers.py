from typing import Optional

from blcount import App, Lam, Term, Var


def naive_count(m: int, n: int) -> int:
    """Direct, unmemoized evaluation of the recurrence."""
    if n <= 1:
        return 0
    return (
        int(m >= n - 1)
        + naive_count(m + 1, n - 2)
        + sum(naive_count(m, j) * naive_count(m, n - 2 - j) for j in range(n - 1))
    )


def _decode(bits: str, pos: int) -> Optional[tuple[Term, int]]:
    if pos >= len(bits):
        return None
    if bits[pos] == "1":
        index = 0
        while pos < len(bits) and bits[pos] == "1":
            index += 1
            pos += 1
        if pos >= len(bits):
            return None
        return Var(index), pos + 1
    if pos + 1 >= len(bits):
        return None
    if bits[pos + 1] == "0":
        decoded = _decode(bits, pos + 2)
        if decoded is None:
            return None
        body, pos = decoded
        return Lam(body), pos
    decoded = _decode(bits, pos + 2)
    if decoded is None:
        return None
    func, pos = decoded
    decoded = _decode(bits, pos)
    if decoded is None:
        return None
    arg, pos = decoded
    return App(func, arg), pos


def terms_by_bits(m: int, n: int) -> set[Term]:
    """Every term of size n with at most m free variables, found by decoding all bit strings."""
    found = set()
    for code in range(1 << n):
        bits = format(code, "b").zfill(n) if n else ""
        decoded = _decode(bits, 0)
        if decoded is None:
            continue
        term, end = decoded
        if end == n and term.is_valid(m):
            found.add(term)
    return found
