"""
Combinatorics — Exact Factorials, Combinations, Permutations

Модуль вычисляет точные количества расстановок на произвольно больших int:
- factorial(n) = n!
- combinations(n, r) = n! / (r! (n - r)!)
- permutations(n, r) = n! / (n - r)!

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда точный int (без float на промежуточных шагах)
2. Все деления — точное целочисленное деление (//): тождество гарантирует делимость
3. Предусловия проверяются ДО арифметики: n >= 0, r >= 0, затем r <= n
4. Без кэширования: повторный вызов пересчитывает результат

Факториал растёт сверхэкспоненциально (20! ≈ 2.4e18, 21! уже вне int64),
поэтому используется встроенный int Python с неограниченной точностью.
"""

from src.core.math.preconditions import (
    validate_integer,
    validate_non_negative_items,
    validate_subset_size,
)


def _validate_pair(n: int, r: int) -> None:
    validate_integer(n, "n")
    validate_integer(r, "r")
    validate_non_negative_items(n, name="n")
    validate_non_negative_items(r, name="r")
    validate_subset_size(n, r)


def factorial(n: int) -> int:
    """
    Факториал n! итеративным умножением 2 * 3 * ... * n.

    Args:
        n: Неотрицательное целое

    Returns:
        n! как точный int (0! = 1)

    Raises:
        ValidationError: Если n не int или n < 0

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
        >>> factorial(20)
        2432902008176640000
    """
    validate_integer(n, "n")
    validate_non_negative_items(n, name="n")

    result = 1
    for i in range(2, n + 1):
        result *= i

    return result


def combinations(n: int, r: int) -> int:
    """
    Количество неупорядоченных подмножеств из r объектов в множестве из n объектов.

    Args:
        n: Количество объектов в множестве
        r: Количество выбираемых объектов

    Returns:
        C(n, r) как точный int

    Raises:
        ValidationError: Если n < 0, r < 0 или r > n

    Examples:
        >>> combinations(20, 10)
        184756
        >>> combinations(52, 5)
        2598960
    """
    _validate_pair(n, r)

    return factorial(n) // factorial(r) // factorial(n - r)


def permutations(n: int, r: int) -> int:
    """
    Количество упорядоченных расстановок r объектов из n объектов.

    Args:
        n: Количество объектов в множестве
        r: Количество выбираемых объектов

    Returns:
        P(n, r) как точный int

    Raises:
        ValidationError: Если n < 0, r < 0 или r > n

    Examples:
        >>> permutations(20, 10)
        670442572800
    """
    _validate_pair(n, r)

    return factorial(n) // factorial(n - r)
