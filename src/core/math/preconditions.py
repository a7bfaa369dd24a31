"""
Preconditions — Domain Checks for Statistical Formulas

Модуль содержит набор stateless проверок доменных ограничений параметров,
которые вызываются формулами ДО любых вычислений:
- Вероятности в диапазоне [0, 1]
- Неотрицательные и ненулевые счётчики (trials, successes, items)
- Соотношения размеров (subset vs set, successes vs trials)
- Защита от деления на ноль
- Размеры последовательностей и границы диапазонов
- Корректность таблицы совместного распределения

Каждая проверка либо молча возвращает None, либо выбрасывает ValidationError
с сообщением, в котором указаны нарушенное условие и значения-нарушители.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверки не имеют состояния: повторный вызов с тем же входом даёт ту же ошибку
2. Проверки не логируют и не модифицируют аргументы
3. Порядок вызова определяет формула: counts → range/ordering → derived (zero denominators)
"""

import math
from typing import Any, Final, Sequence

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Абсолютная толерантность суммы таблицы совместного распределения
# |Σ p(y1, y2) - 1| > JOINT_PROBABILITY_TOLERANCE → ValidationError
JOINT_PROBABILITY_TOLERANCE: Final[float] = 1e-6


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ValidationError(ValueError):
    """
    Нарушение доменного ограничения параметра формулы.

    Выбрасывается до начала вычислений; частичных результатов не бывает.
    Наследуется от ValueError, чтобы существующие `except ValueError` продолжали работать.
    """

    pass


# =============================================================================
# ТИПЫ
# =============================================================================


def validate_integer(value: Any, name: str) -> None:
    """
    Валидация, что счётчик является целым числом (bool не допускается).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValidationError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")


# =============================================================================
# ВЕРОЯТНОСТИ И ДЕЛЕНИЕ
# =============================================================================


def validate_probability(p: float, name: str = "p") -> None:
    """
    Валидация вероятности: 0 <= p <= 1 (границы включены).

    NaN не проходит проверку.

    Args:
        p: Вероятность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValidationError: Если p вне [0, 1]

    Examples:
        >>> validate_probability(0.0)
        >>> validate_probability(1.0)
        >>> validate_probability(1.5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValidationError: Invalid probability p = 1.5; must be between 0 and 1, inclusive
    """
    if not 0 <= p <= 1:
        raise ValidationError(
            f"Invalid probability {name} = {p}; must be between 0 and 1, inclusive"
        )


def validate_non_zero(value: float, name: str = "value") -> None:
    """
    Валидация делителя: value != 0.

    Используется перед делением вместо ZeroDivisionError, чтобы сообщение
    было одинаковым во всех местах вызова. Сколь угодно малые ненулевые
    значения проходят.

    Args:
        value: Будущий делитель
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValidationError: Если value == 0
    """
    if value == 0:
        raise ValidationError(f"Cannot divide by zero: {name} = 0")


# =============================================================================
# СООТНОШЕНИЯ СЧЁТЧИКОВ
# =============================================================================


def validate_subset_size(n: int, r: int) -> None:
    """
    Валидация размера подмножества: r <= n.

    Args:
        n: Количество объектов в множестве
        r: Количество объектов в подмножестве

    Raises:
        ValidationError: Если r > n
    """
    if r > n:
        raise ValidationError(f"Cannot have {r} objects in subset of {n} objects")


def validate_successes_within_trials(n: int, y: int) -> None:
    """
    Валидация количества успехов: y <= n.

    Не проверяет неотрицательность (это задача вызывающей формулы).

    Args:
        n: Количество испытаний
        y: Желаемое количество успехов

    Raises:
        ValidationError: Если y > n
    """
    if y > n:
        raise ValidationError(f"Cannot have {y} successes in {n} trials")


# =============================================================================
# НЕОТРИЦАТЕЛЬНОСТЬ
# =============================================================================


def validate_non_negative_trials(n: int) -> None:
    """Валидация: количество испытаний n >= 0."""
    if n < 0:
        raise ValidationError(f"Number of trials cannot be negative, got {n}")


def validate_non_negative_successes(n: int) -> None:
    """Валидация: количество успехов n >= 0."""
    if n < 0:
        raise ValidationError(f"Number of successes cannot be negative, got {n}")


def validate_non_negative_items(n: int, name: str = "n") -> None:
    """Валидация: количество объектов n >= 0 (name попадает в сообщение)."""
    if n < 0:
        raise ValidationError(f"Number of items cannot be negative, got {name} = {n}")


def validate_non_negative_rate(rate: float) -> None:
    """
    Валидация интенсивности (среднее число событий за период): 0 <= rate < inf.

    NaN и бесконечность не проходят проверку.

    Raises:
        ValidationError: Если rate < 0, rate = inf или NaN
    """
    if rate < 0:
        raise ValidationError(f"Occurrence rate cannot be negative, got {rate}")
    if not math.isfinite(rate):
        raise ValidationError(f"Occurrence rate must be finite, got {rate}")


# =============================================================================
# НЕНУЛЕВЫЕ СЧЁТЧИКИ
# =============================================================================


def validate_non_zero_trials(n: int) -> None:
    """Валидация: количество испытаний n != 0."""
    if n == 0:
        raise ValidationError("Number of trials cannot be zero")


def validate_non_zero_successes(n: int) -> None:
    """Валидация: количество успехов n != 0 (negative binomial требует r >= 1)."""
    if n == 0:
        raise ValidationError("Number of successes cannot be zero")


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ И ДИАПАЗОНЫ
# =============================================================================


def validate_equal_length(a: Sequence[Any], b: Sequence[Any]) -> None:
    """
    Валидация, что две последовательности одной длины.

    Raises:
        ValidationError: Если len(a) != len(b)
    """
    if len(a) != len(b):
        raise ValidationError(
            f"Sequences must be of equal length, got {len(a)} and {len(b)}"
        )


def validate_min_size(values: Sequence[Any], min_size: int) -> None:
    """
    Валидация минимального размера последовательности.

    Args:
        values: Проверяемая последовательность
        min_size: Минимально допустимая длина

    Raises:
        ValidationError: Если len(values) < min_size
    """
    if len(values) < min_size:
        raise ValidationError(
            f"Sequence must have length of at least {min_size}, got {len(values)}"
        )


def validate_range(minimum: float, maximum: float, inclusive: bool = True) -> None:
    """
    Валидация границ диапазона.

    Args:
        minimum: Нижняя граница
        maximum: Верхняя граница
        inclusive: True — диапазон нулевой ширины допустим (maximum >= minimum),
            False — требуется строгое maximum > minimum (границы распределения)

    Raises:
        ValidationError: Если maximum < minimum (inclusive), maximum <= minimum (strict)
            или одна из границ NaN
    """
    # Сравнения с NaN всегда False, поэтому условия записаны через not
    if inclusive and not minimum <= maximum:
        raise ValidationError(
            "Maximum of range must be greater than or equal to minimum, "
            f"got minimum={minimum}, maximum={maximum}"
        )
    if not inclusive and not minimum < maximum:
        raise ValidationError(
            "Maximum of distribution must be strictly greater than minimum, "
            f"got minimum={minimum}, maximum={maximum}"
        )


# =============================================================================
# ТАБЛИЦА СОВМЕСТНОГО РАСПРЕДЕЛЕНИЯ
# =============================================================================


def validate_joint_probability_table(table: Sequence[Sequence[float]]) -> None:
    """
    Валидация таблицы p(y1, y2) дискретного двумерного распределения.

    Порядок проверок:
    1. Таблица и первая строка непустые
    2. Каждый элемент — вероятность в [0, 1]
    3. Все строки одной длины
    4. Сумма элементов равна 1 с точностью JOINT_PROBABILITY_TOLERANCE

    Args:
        table: Таблица вероятностей (строки — y1, столбцы — y2)

    Raises:
        ValidationError: Если таблица не является корректным распределением
    """
    if len(table) == 0 or len(table[0]) == 0:
        raise ValidationError("Probability table must have at least one row and one column")

    total = 0.0
    for i, row in enumerate(table):
        for j, entry in enumerate(row):
            validate_probability(entry, name=f"p[{i}][{j}]")
            total += entry

    row_length = len(table[0])
    for row in table[1:]:
        if len(row) != row_length:
            raise ValidationError("Rows in probability table must be of equal length")

    if math.fabs(total - 1.0) > JOINT_PROBABILITY_TOLERANCE:
        raise ValidationError(f"Total probability must be equal to 1, got {total}")


def validate_table_indices(table: Sequence[Sequence[float]], y1: int, y2: int) -> None:
    """
    Валидация индексов (y1, y2) относительно границ таблицы.

    Предполагает, что таблица уже прошла validate_joint_probability_table.

    Raises:
        ValidationError: Если y1 или y2 вне таблицы
    """
    last_row = len(table) - 1
    last_column = len(table[0]) - 1

    if y1 < 0 or y1 > last_row:
        raise ValidationError(
            f"y1 must be in range of table (between 0 and {last_row}, inclusive), got {y1}"
        )

    if y2 < 0 or y2 > last_column:
        raise ValidationError(
            f"y2 must be in range of table (between 0 and {last_column}, inclusive), got {y2}"
        )
