"""
Uniform Distribution — непрерывное равномерное распределение на [θ1, θ2]

ФОРМУЛЫ:
    P(c <= Y <= d) = (min(θ2, d) - max(θ1, c)) / (θ2 - θ1)
    E(Y) = (θ1 + θ2) / 2
    V(Y) = (θ2 - θ1)^2 / 12

Если диапазон [c, d] не пересекается с носителем, вероятность равна 0.
"""

from src.core.math.preconditions import validate_range


def _validate_support(theta1: float, theta2: float) -> None:
    validate_range(theta1, theta2, inclusive=False)


def between(theta1: float, theta2: float, minimum: float, maximum: float) -> float:
    """
    Вероятность попадания значения в [minimum, maximum].

    Args:
        theta1: Нижняя граница распределения
        theta2: Верхняя граница распределения
        minimum: Нижняя граница диапазона
        maximum: Верхняя граница диапазона

    Returns:
        P(minimum <= Y <= maximum)

    Raises:
        ValidationError: Если theta2 <= theta1 или maximum < minimum

    Examples:
        >>> between(20.0, 25.0, 22.0, 24.0)
        0.4
    """
    _validate_support(theta1, theta2)
    validate_range(minimum, maximum, inclusive=True)

    overlap = min(theta2, maximum) - max(theta1, minimum)

    return max(overlap, 0.0) / (theta2 - theta1)


def at_least(theta1: float, theta2: float, minimum: float) -> float:
    """Вероятность значения не меньше minimum: P(Y >= minimum)."""
    _validate_support(theta1, theta2)
    validate_range(minimum, theta2, inclusive=True)

    return between(theta1, theta2, minimum, theta2)


def at_most(theta1: float, theta2: float, maximum: float) -> float:
    """Вероятность значения не больше maximum: P(Y <= maximum)."""
    _validate_support(theta1, theta2)
    validate_range(theta1, maximum, inclusive=True)

    return between(theta1, theta2, theta1, maximum)


def expected_value(theta1: float, theta2: float) -> float:
    """E(Y) = (θ1 + θ2) / 2."""
    _validate_support(theta1, theta2)

    return (theta1 + theta2) / 2


def variance(theta1: float, theta2: float) -> float:
    """V(Y) = (θ2 - θ1)^2 / 12."""
    _validate_support(theta1, theta2)

    return (theta2 - theta1) ** 2 / 12
