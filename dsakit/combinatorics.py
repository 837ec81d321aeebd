"""Binomial coefficients and Pascal's triangle."""


def n_choose_r(n: int, r: int) -> int:
    """Return C(n, r) by the multiplicative formula; r <= 0 gives 1."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_element(row: int, col: int) -> int:
    """Return the element at 1-based ``(row, col)`` of Pascal's triangle."""
    return n_choose_r(row - 1, col - 1)