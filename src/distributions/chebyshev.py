"""
Chebyshev's Inequality — границы вероятности отклонения от среднего

Для k = max_dev / std_dev:
    P(|Y - μ| < k σ) >= 1 - 1 / k^2
    P(|Y - μ| >= k σ) <= 1 / k^2
"""

from src.core.math.preconditions import validate_non_zero


def _k(std_dev: float, max_dev: float) -> float:
    validate_non_zero(std_dev, name="std_dev")
    validate_non_zero(max_dev, name="max_dev")

    return max_dev / std_dev


def within_range(std_dev: float, max_dev: float) -> float:
    """
    Нижняя граница вероятности попасть в пределы max_dev от среднего.

    Args:
        std_dev: Стандартное отклонение распределения
        max_dev: Максимальное допустимое отклонение

    Returns:
        1 - 1 / k^2

    Raises:
        ValidationError: Если std_dev == 0 или max_dev == 0
    """
    k = _k(std_dev, max_dev)

    return 1 - 1 / (k * k)


def outside_range(std_dev: float, max_dev: float) -> float:
    """
    Верхняя граница вероятности выйти за пределы max_dev от среднего.

    Returns:
        1 / k^2

    Raises:
        ValidationError: Если std_dev == 0 или max_dev == 0
    """
    k = _k(std_dev, max_dev)

    return 1 / (k * k)
