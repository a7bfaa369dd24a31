"""
Discrete Bivariate Distribution — таблица совместного распределения p(y1, y2)

Строки таблицы соответствуют значениям Y1, столбцы — значениям Y2.

ФОРМУЛЫ:
    p(y1, y2) = P(Y1 = y1, Y2 = y2) = table[y1][y2]
    F(y1, y2) = P(Y1 <= y1, Y2 <= y2) = Σ_{i<=y1} Σ_{j<=y2} table[i][j]
"""

from typing import Sequence

from src.core.math.preconditions import (
    validate_integer,
    validate_joint_probability_table,
    validate_table_indices,
)


def _validate(table: Sequence[Sequence[float]], y1: int, y2: int) -> None:
    validate_joint_probability_table(table)
    validate_integer(y1, "y1")
    validate_integer(y2, "y2")
    validate_table_indices(table, y1, y2)


def joint_probability(table: Sequence[Sequence[float]], y1: int, y2: int) -> float:
    """
    Совместная вероятность P(Y1 = y1, Y2 = y2).

    Raises:
        ValidationError: Если таблица некорректна или индексы вне таблицы
    """
    _validate(table, y1, y2)

    return table[y1][y2]


def joint_distribution(table: Sequence[Sequence[float]], y1: int, y2: int) -> float:
    """
    Совместная функция распределения F(y1, y2) = P(Y1 <= y1, Y2 <= y2).

    Raises:
        ValidationError: Если таблица некорректна или индексы вне таблицы
    """
    _validate(table, y1, y2)

    return sum(sum(row[: y2 + 1]) for row in table[: y1 + 1])
