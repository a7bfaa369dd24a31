"""
Exact — точное сочетание Exact Count с вероятностями

Количество расстановок (int произвольной длины) может не помещаться во float,
а произведение вероятностей p^y (1-p)^(n-y) — уходить в underflow.
Поэтому произведение считается в Decimal с повышенной точностью и
приводится к float только в конце.

Диапазон порядков расширен до MAX_EMAX / MIN_EMIN: rate^y для Poisson
с большими rate и y выходит за стандартный Emax = 999999.
"""

from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext
from typing import Final

# Количество значащих цифр Decimal для промежуточных произведений
DECIMAL_PRECISION: Final[int] = 80


def _power(base: float, exponent: int) -> Decimal:
    # Decimal(0) ** 0 не определён, а в формулах 0^0 = 1
    if exponent == 0:
        return Decimal(1)
    return Decimal(base) ** exponent


def count_times_powers(count: int, *powers: tuple[float, int]) -> float:
    """
    count * Π base^exponent, вычисленное в Decimal.

    Args:
        count: Точное количество (int)
        *powers: Пары (base, exponent) с неотрицательными exponent

    Returns:
        Результат как float

    Examples:
        >>> count_times_powers(6, (0.5, 2), (0.5, 2))
        0.375
    """
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        context.Emax = MAX_EMAX
        context.Emin = MIN_EMIN
        result = Decimal(count)
        for base, exponent in powers:
            result *= _power(base, exponent)

    return float(result)


def power_over_factorial_times_exp(rate: float, y: int, y_factorial: int) -> float:
    """
    rate^y / y! * e^(-rate), вычисленное в Decimal (член распределения Пуассона).

    Returns:
        Результат как float
    """
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        context.Emax = MAX_EMAX
        context.Emin = MIN_EMIN
        result = _power(rate, y) / Decimal(y_factorial) * (-Decimal(rate)).exp()

    return float(result)
