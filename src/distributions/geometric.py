"""
Geometric Distribution — номер испытания Y, на котором случился первый успех

Носитель: y = 1, 2, 3, ...

ФОРМУЛЫ:
    P(Y = y) = (1 - p)^(y - 1) p
    P(Y >= y) = (1 - p)^(y - 1)
    P(Y <= y) = 1 - (1 - p)^y
    E(Y) = 1 / p
    V(Y) = (1 - p) / p^2
"""

from src.core.math.preconditions import (
    validate_integer,
    validate_non_negative_trials,
    validate_non_zero,
    validate_non_zero_trials,
    validate_probability,
)


def _validate(y: int, p: float) -> None:
    validate_integer(y, "y")
    validate_non_negative_trials(y)
    validate_non_zero_trials(y)
    validate_probability(p)


def _validate_divisor(p: float) -> None:
    validate_probability(p)
    validate_non_zero(p, name="p")


def exactly(y: int, p: float) -> float:
    """
    Вероятность первого успеха ровно на y-м испытании.

    Args:
        y: Номер испытания (>= 1)
        p: Вероятность успеха в каждом испытании

    Returns:
        P(Y = y)

    Raises:
        ValidationError: Если y < 1 или p вне [0, 1]
    """
    _validate(y, p)

    return (1 - p) ** (y - 1) * p


def at_least(y: int, p: float) -> float:
    """Вероятность первого успеха на y-м испытании или позже: P(Y >= y)."""
    _validate(y, p)

    return (1 - p) ** (y - 1)


def at_most(y: int, p: float) -> float:
    """Вероятность первого успеха не позже y-го испытания: P(Y <= y)."""
    _validate(y, p)

    return 1 - (1 - p) ** y


def expected_value(p: float) -> float:
    """E(Y) = 1 / p."""
    _validate_divisor(p)

    return 1 / p


def variance(p: float) -> float:
    """V(Y) = (1 - p) / p^2."""
    _validate_divisor(p)

    return (1 - p) / (p * p)
