"""
Hypergeometric Distribution — выборка без возвращения

Из множества в N объектов, r из которых помечены, извлекается n объектов.
Y — количество помеченных объектов в выборке.

ФОРМУЛЫ:
    P(Y = y) = C(r, y) C(N - r, n - y) / C(N, n)
    E(Y) = n r / N
    V(Y) = n (r / N) ((N - r) / N) ((N - n) / (N - 1))

Носитель: max(0, n - (N - r)) <= y <= min(n, r).
Значения y ниже носителя допустимы и имеют вероятность 0; значения выше
носителя (y > n или y > r) отклоняются проверками.

Деление C(...) * C(...) / C(N, n) выполняется над int: Python округляет
частное больших целых корректно, без переполнения float.
"""

from src.core.math.combinatorics import combinations
from src.core.math.preconditions import (
    validate_integer,
    validate_non_negative_items,
    validate_non_negative_successes,
    validate_non_zero,
    validate_subset_size,
    validate_successes_within_trials,
)


def _validate_population(big_n: int, n: int, r: int) -> None:
    validate_integer(big_n, "big_n")
    validate_integer(n, "n")
    validate_integer(r, "r")
    validate_non_negative_items(big_n, name="big_n")
    validate_non_negative_items(n, name="n")
    validate_non_negative_items(r, name="r")
    validate_subset_size(big_n, n)
    validate_subset_size(big_n, r)


def _validate(big_n: int, n: int, r: int, y: int) -> None:
    _validate_population(big_n, n, r)
    validate_integer(y, "y")
    validate_non_negative_successes(y)
    validate_successes_within_trials(n, y)
    validate_subset_size(r, y)


def _pmf(big_n: int, n: int, r: int, y: int) -> float:
    if n - y > big_n - r:
        return 0.0

    return combinations(r, y) * combinations(big_n - r, n - y) / combinations(big_n, n)


def exactly(big_n: int, n: int, r: int, y: int) -> float:
    """
    Вероятность извлечь ровно y помеченных объектов.

    Args:
        big_n: Размер множества N
        n: Количество извлекаемых объектов
        r: Количество помеченных объектов в множестве
        y: Желаемое количество помеченных объектов в выборке

    Returns:
        P(Y = y)

    Raises:
        ValidationError: Если счётчики отрицательны, n > N, r > N, y > n или y > r
    """
    _validate(big_n, n, r, y)

    return _pmf(big_n, n, r, y)


def at_least(big_n: int, n: int, r: int, y: int) -> float:
    """Вероятность извлечь не менее y помеченных объектов: P(Y >= y)."""
    _validate(big_n, n, r, y)

    return sum(_pmf(big_n, n, r, i) for i in range(y, min(n, r) + 1))


def at_most(big_n: int, n: int, r: int, y: int) -> float:
    """Вероятность извлечь не более y помеченных объектов: P(Y <= y)."""
    _validate(big_n, n, r, y)

    return sum(_pmf(big_n, n, r, i) for i in range(0, y + 1))


def expected_value(big_n: int, n: int, r: int) -> float:
    """E(Y) = n r / N."""
    _validate_population(big_n, n, r)
    validate_non_zero(big_n, name="big_n")

    return n * r / big_n


def variance(big_n: int, n: int, r: int) -> float:
    """V(Y) = n (r / N) ((N - r) / N) ((N - n) / (N - 1))."""
    _validate_population(big_n, n, r)
    validate_non_zero(big_n, name="big_n")
    validate_non_zero(big_n - 1, name="big_n - 1")

    return n * (r / big_n) * ((big_n - r) / big_n) * ((big_n - n) / (big_n - 1))
