"""
Binomial Distribution — число успехов Y в n независимых испытаниях

ФОРМУЛЫ:
    P(Y = y) = C(n, y) p^y (1 - p)^(n - y)
    P(Y >= y) = Σ_{i=y..n} P(Y = i)
    P(Y <= y) = Σ_{i=0..y} P(Y = i)
    E(Y) = n p
    V(Y) = n p (1 - p)

Для сравнения с замкнутыми формулами моменты также считаются суммированием
по функции вероятности (expected_value_from_pmf, variance_from_pmf).

Порядок проверок: trials → successes → y <= n → probability.
"""

from src.core.math.combinatorics import combinations
from src.core.math.preconditions import (
    validate_integer,
    validate_non_negative_successes,
    validate_non_negative_trials,
    validate_probability,
    validate_successes_within_trials,
)
from src.distributions.exact import count_times_powers


def _validate_trials_and_probability(n: int, p: float) -> None:
    validate_integer(n, "n")
    validate_non_negative_trials(n)
    validate_probability(p)


def _validate(n: int, y: int, p: float) -> None:
    validate_integer(n, "n")
    validate_integer(y, "y")
    validate_non_negative_trials(n)
    validate_non_negative_successes(y)
    validate_successes_within_trials(n, y)
    validate_probability(p)


def _pmf(n: int, y: int, p: float) -> float:
    return count_times_powers(combinations(n, y), (p, y), (1 - p, n - y))


def exactly(n: int, y: int, p: float) -> float:
    """
    Вероятность ровно y успехов в n испытаниях.

    Args:
        n: Количество испытаний
        y: Желаемое количество успехов
        p: Вероятность успеха в одном испытании

    Returns:
        P(Y = y)

    Raises:
        ValidationError: Если n < 0, y < 0, y > n или p вне [0, 1]

    Examples:
        >>> round(exactly(4, 2, 0.5), 6)
        0.375
    """
    _validate(n, y, p)

    return _pmf(n, y, p)


def at_least(n: int, y: int, p: float) -> float:
    """Вероятность не менее y успехов: P(Y >= y)."""
    _validate(n, y, p)

    return sum(_pmf(n, i, p) for i in range(y, n + 1))


def at_most(n: int, y: int, p: float) -> float:
    """Вероятность не более y успехов: P(Y <= y)."""
    _validate(n, y, p)

    return sum(_pmf(n, i, p) for i in range(0, y + 1))


def expected_value(n: int, p: float) -> float:
    """E(Y) = n p."""
    _validate_trials_and_probability(n, p)

    return n * p


def variance(n: int, p: float) -> float:
    """V(Y) = n p q, где q = 1 - p."""
    _validate_trials_and_probability(n, p)

    return n * p * (1 - p)


def expected_value_from_pmf(n: int, p: float) -> float:
    """E(Y) = Σ y P(Y = y) — суммирование по функции вероятности."""
    _validate_trials_and_probability(n, p)

    return sum(_pmf(n, i, p) * i for i in range(0, n + 1))


def variance_from_pmf(n: int, p: float) -> float:
    """V(Y) = Σ (y - E(Y))^2 P(Y = y) — суммирование по функции вероятности."""
    _validate_trials_and_probability(n, p)

    center = expected_value_from_pmf(n, p)
    return sum(_pmf(n, i, p) * (i - center) ** 2 for i in range(0, n + 1))
