"""
Tables — форматирование демонстрационных таблиц

Функции только строят строки; печатью занимается CLI.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

# Сигнатура функции вероятности одной переменной: y -> P
ProbabilityFn = Callable[[int], float]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TableFormat:
    """Конфигурация ширины и точности колонок."""

    index_width: int = 3
    column_width: int = 9
    precision: int = 6
    grid_width: int = 10

    def value(self, x: float) -> str:
        return f"{x:<{self.column_width}.{self.precision}f}"

    def grid_value(self, x: float) -> str:
        return f"{x:>{self.grid_width}.{self.precision}f}"


DEFAULT_FORMAT = TableFormat()


# =============================================================================
# ТАБЛИЦА P(Y=y), P(Y>=y), P(Y<=y)
# =============================================================================


def probability_header(fmt: TableFormat = DEFAULT_FORMAT) -> str:
    columns = ("P(Y=y)", "P(Y>=y)", "P(Y<=y)")
    return " ".join(
        [f"{'y':<{fmt.index_width}}"] + [f"{name:<{fmt.column_width}}" for name in columns]
    ).rstrip()


def probability_rows(
    ys: Iterable[int],
    exactly: ProbabilityFn,
    at_least: ProbabilityFn,
    at_most: ProbabilityFn,
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    """
    Строки таблицы для каждого y.

    Args:
        ys: Значения y (строки таблицы)
        exactly: y -> P(Y = y)
        at_least: y -> P(Y >= y)
        at_most: y -> P(Y <= y)
        fmt: Формат колонок

    Returns:
        Список строк без завершающих пробелов
    """
    rows = []
    for y in ys:
        cells = [f"{y:<{fmt.index_width}d}"]
        cells += [fmt.value(fn(y)) for fn in (exactly, at_least, at_most)]
        rows.append(" ".join(cells).rstrip())
    return rows


def moment_lines(expected: float, variance: float) -> list[str]:
    return [f"E(Y) = {expected}", f"V(Y) = {variance}"]


# =============================================================================
# ДВУМЕРНАЯ СЕТКА
# =============================================================================


def grid_rows(
    title: str,
    rows: int,
    columns: int,
    cell: Callable[[int, int], float],
    fmt: TableFormat = DEFAULT_FORMAT,
) -> list[str]:
    """Сетка значений cell(y1, y2) с заголовком столбцов y2 и строк y1."""
    header = f"{title:>{fmt.grid_width}}" + "".join(
        f"{j:>{fmt.grid_width}d}" for j in range(columns)
    )
    lines = [header]
    for i in range(rows):
        lines.append(
            f"{i:>{fmt.grid_width}d}"
            + "".join(fmt.grid_value(cell(i, j)) for j in range(columns))
        )
    return lines


def format_sequence(values: Sequence[object]) -> str:
    """Печать последовательности в виде [a, b, c] без кавычек у строк."""
    return "[" + ", ".join(str(value) for value in values) + "]"
