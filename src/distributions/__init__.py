"""
Distributions — формулы вероятностных распределений

Каждый модуль — набор свободных функций с единым контрактом:
проверка предусловий через src.core.math.preconditions, затем вычисление,
затем возврат float. Модули экспортируются целиком, так как имена функций
(exactly, at_least, at_most, expected_value, variance) у них общие.

- binomial: число успехов в n испытаниях
- geometric: номер испытания первого успеха
- hypergeometric: выборка без возвращения
- negative_binomial: номер испытания r-го успеха
- poisson: число событий за период
- uniform: непрерывное равномерное
- multivariate: таблица совместного распределения двух величин
- chebyshev: неравенство Чебышёва
"""

from src.distributions import (
    binomial,
    chebyshev,
    geometric,
    hypergeometric,
    multivariate,
    negative_binomial,
    poisson,
    uniform,
)

__all__ = [
    "binomial",
    "chebyshev",
    "geometric",
    "hypergeometric",
    "multivariate",
    "negative_binomial",
    "poisson",
    "uniform",
]
