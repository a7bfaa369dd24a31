"""
Descriptive Statistics — описательные статистики выборки

- mean: среднее арифметическое
- median: медиана (среднее двух центральных при чётной длине)
- mode: мода (при нескольких модах — наименьшее значение)
- variance: выборочная дисперсия (делитель n - 1)
- standard_deviation: корень из выборочной дисперсии

Входная последовательность никогда не модифицируется.
"""

import math
from typing import Sequence

from src.core.math.preconditions import validate_min_size


def sorted_copy(values: Sequence[float]) -> list[float]:
    """Новый список, отсортированный по возрастанию (исходный не меняется)."""
    return sorted(values)


def mean(values: Sequence[float]) -> float:
    """
    Среднее арифметическое.

    Raises:
        ValidationError: Если последовательность пуста
    """
    validate_min_size(values, 1)

    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """
    Медиана: центральное значение отсортированной выборки.

    Examples:
        >>> median([2.0, 4.0, 4.0, 1.0, 3.0])
        3.0
        >>> median([2.0, 4.0, 4.0, 1.0, 3.0, 6.0])
        3.5
    """
    validate_min_size(values, 1)

    ordered = sorted_copy(values)
    middle = len(ordered) // 2

    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2

    return ordered[middle]


def mode(values: Sequence[float]) -> float:
    """
    Мода: наиболее часто встречающееся значение.

    Один проход по отсортированной выборке; при равенстве частот
    побеждает первое (наименьшее) значение.
    """
    validate_min_size(values, 1)

    ordered = sorted_copy(values)

    best_value = ordered[0]
    best_count = 0
    current_count = 0

    for i, value in enumerate(ordered):
        if i > 0 and value == ordered[i - 1]:
            current_count += 1
        else:
            current_count = 1

        if current_count > best_count:
            best_count = current_count
            best_value = value

    return best_value


def variance(values: Sequence[float]) -> float:
    """
    Выборочная дисперсия: Σ (x - mean)^2 / (n - 1).

    Raises:
        ValidationError: Если в выборке меньше двух значений
    """
    validate_min_size(values, 2)

    center = mean(values)
    squared = sum((value - center) ** 2 for value in values)

    return squared / (len(values) - 1)


def standard_deviation(values: Sequence[float]) -> float:
    """Выборочное стандартное отклонение: sqrt(variance)."""
    return math.sqrt(variance(values))
