"""
Poisson Distribution — количество событий Y за период при интенсивности λ

ФОРМУЛЫ:
    P(Y = y) = λ^y e^(-λ) / y!
    P(Y >= y) = 1 - Σ_{i=0..y-1} P(Y = i)
    P(Y <= y) = Σ_{i=0..y} P(Y = i)
    E(Y) = V(Y) = λ
"""

from src.core.math.combinatorics import factorial
from src.core.math.preconditions import (
    validate_integer,
    validate_non_negative_rate,
    validate_non_negative_successes,
)
from src.distributions.exact import power_over_factorial_times_exp


def _validate(rate: float, y: int) -> None:
    validate_non_negative_rate(rate)
    validate_integer(y, "y")
    validate_non_negative_successes(y)


def _pmf(rate: float, y: int) -> float:
    return power_over_factorial_times_exp(rate, y, factorial(y))


def exactly(rate: float, y: int) -> float:
    """
    Вероятность ровно y событий за период.

    Args:
        rate: Среднее количество событий за период (λ)
        y: Желаемое количество событий

    Returns:
        P(Y = y)

    Raises:
        ValidationError: Если rate < 0 или y < 0
    """
    _validate(rate, y)

    return _pmf(rate, y)


def at_least(rate: float, y: int) -> float:
    """Вероятность не менее y событий за период: P(Y >= y)."""
    _validate(rate, y)

    return 1 - sum(_pmf(rate, i) for i in range(0, y))


def at_most(rate: float, y: int) -> float:
    """Вероятность не более y событий за период: P(Y <= y)."""
    _validate(rate, y)

    return sum(_pmf(rate, i) for i in range(0, y + 1))


def expected_value(rate: float) -> float:
    """E(Y) = λ (по определению; функция оставлена для единообразия)."""
    validate_non_negative_rate(rate)

    return rate


def variance(rate: float) -> float:
    """V(Y) = λ."""
    validate_non_negative_rate(rate)

    return rate
