"""
Negative Binomial Distribution — номер испытания Y, на котором случился r-й успех

Носитель: y = r, r + 1, ...

ФОРМУЛЫ:
    P(Y = y) = C(y - 1, r - 1) p^r (1 - p)^(y - r)
    P(Y >= y) = 1 - Σ_{i=r..y-1} P(Y = i)
    P(Y <= y) = Σ_{i=r..y} P(Y = i)
    E(Y) = r / p
    V(Y) = r (1 - p) / p^2
"""

from src.core.math.combinatorics import combinations
from src.core.math.preconditions import (
    validate_integer,
    validate_non_negative_successes,
    validate_non_negative_trials,
    validate_non_zero,
    validate_non_zero_successes,
    validate_non_zero_trials,
    validate_probability,
    validate_successes_within_trials,
)
from src.distributions.exact import count_times_powers


def _validate_successes(r: int) -> None:
    validate_integer(r, "r")
    validate_non_negative_successes(r)
    validate_non_zero_successes(r)


def _validate(y: int, r: int, p: float) -> None:
    validate_integer(y, "y")
    validate_non_negative_trials(y)
    validate_non_zero_trials(y)
    _validate_successes(r)
    validate_successes_within_trials(y, r)
    validate_probability(p)


def _pmf(y: int, r: int, p: float) -> float:
    return count_times_powers(combinations(y - 1, r - 1), (p, r), (1 - p, y - r))


def exactly(y: int, r: int, p: float) -> float:
    """
    Вероятность того, что r-й успех случится ровно на y-м испытании.

    Args:
        y: Номер испытания
        r: Требуемое количество успехов (>= 1)
        p: Вероятность успеха в каждом испытании

    Returns:
        P(Y = y)

    Raises:
        ValidationError: Если y < 1, r < 1, r > y или p вне [0, 1]
    """
    _validate(y, r, p)

    return _pmf(y, r, p)


def at_least(y: int, r: int, p: float) -> float:
    """Вероятность того, что r-й успех случится на y-м испытании или позже."""
    _validate(y, r, p)

    return 1 - sum(_pmf(i, r, p) for i in range(r, y))


def at_most(y: int, r: int, p: float) -> float:
    """Вероятность того, что r-й успех случится не позже y-го испытания."""
    _validate(y, r, p)

    return sum(_pmf(i, r, p) for i in range(r, y + 1))


def expected_value(r: int, p: float) -> float:
    """E(Y) = r / p."""
    _validate_successes(r)
    validate_probability(p)
    validate_non_zero(p, name="p")

    return r / p


def variance(r: int, p: float) -> float:
    """V(Y) = r (1 - p) / p^2."""
    _validate_successes(r)
    validate_probability(p)
    validate_non_zero(p, name="p")

    return r * (1 - p) / (p * p)
