"""
Probability Axioms — правила сложения, умножения и формула Байеса

Вычисления на float: результаты подвержены ошибкам округления,
поэтому проверки независимости сравнивают с толерантностью.
"""

import math
from typing import Final, Sequence

from src.core.math.preconditions import (
    validate_equal_length,
    validate_min_size,
    validate_non_zero,
    validate_probability,
)

# Абсолютная толерантность для проверок независимости событий
INDEPENDENCE_ABS_TOLERANCE: Final[float] = 1e-12


def dependent_intersection(p_a: float, p_b_given_a: float) -> float:
    """P(A ∩ B) = P(A) * P(B|A)."""
    validate_probability(p_a, name="p_a")
    validate_probability(p_b_given_a, name="p_b_given_a")

    return p_a * p_b_given_a


def independent_intersection(p_a: float, p_b: float) -> float:
    """P(A ∩ B) = P(A) * P(B) для независимых событий."""
    validate_probability(p_a, name="p_a")
    validate_probability(p_b, name="p_b")

    return p_a * p_b


def union(p_a: float, p_b: float, p_intersection: float) -> float:
    """P(A ∪ B) = P(A) + P(B) - P(A ∩ B)."""
    validate_probability(p_a, name="p_a")
    validate_probability(p_b, name="p_b")
    validate_probability(p_intersection, name="p_intersection")

    return p_a + p_b - p_intersection


def exclusive_union(p_a: float, p_b: float, p_intersection: float) -> float:
    """P(A Δ B) = P(A) + P(B) - 2 P(A ∩ B) (ровно одно из событий, A XOR B)."""
    validate_probability(p_a, name="p_a")
    validate_probability(p_b, name="p_b")
    validate_probability(p_intersection, name="p_intersection")

    return p_a + p_b - 2 * p_intersection


def are_independent_from_intersection(
    p_a: float,
    p_b: float,
    p_intersection: float,
    abs_tol: float = INDEPENDENCE_ABS_TOLERANCE,
) -> bool:
    """
    Независимость по пересечению: P(A ∩ B) == P(A) * P(B).

    Args:
        p_a: P(A)
        p_b: P(B)
        p_intersection: P(A ∩ B)
        abs_tol: Абсолютная толерантность сравнения

    Returns:
        True если события независимы (с учётом толерантности)
    """
    validate_probability(p_a, name="p_a")
    validate_probability(p_b, name="p_b")
    validate_probability(p_intersection, name="p_intersection")

    return math.isclose(p_intersection, p_a * p_b, rel_tol=0.0, abs_tol=abs_tol)


def are_independent_from_union(
    p_a: float,
    p_b: float,
    p_union: float,
    abs_tol: float = INDEPENDENCE_ABS_TOLERANCE,
) -> bool:
    """
    Независимость по объединению: 1 - P(A ∪ B) == (1 - P(A)) * (1 - P(B)).

    Менее надёжна, чем проверка по пересечению: вычитания из 1 теряют точность.
    """
    validate_probability(p_a, name="p_a")
    validate_probability(p_b, name="p_b")
    validate_probability(p_union, name="p_union")

    return math.isclose(1 - p_union, (1 - p_a) * (1 - p_b), rel_tol=0.0, abs_tol=abs_tol)


def conditional_probability(p_intersection: float, p_b: float) -> float:
    """
    P(A|B) = P(A ∩ B) / P(B).

    Raises:
        ValidationError: Если аргументы не вероятности или P(B) == 0
    """
    validate_probability(p_intersection, name="p_intersection")
    validate_probability(p_b, name="p_b")
    validate_non_zero(p_b, name="p_b")

    return p_intersection / p_b


def bayesian_probabilities(
    p_conditionals: Sequence[float],
    p_bs: Sequence[float],
) -> list[float]:
    """
    Формула Байеса для разбиения B1, ..., Bk.

    P(Bi|A) = P(A|Bi) P(Bi) / Σj P(A|Bj) P(Bj)

    Args:
        p_conditionals: P(A|B1), ..., P(A|Bk)
        p_bs: P(B1), ..., P(Bk)

    Returns:
        Список P(B1|A), ..., P(Bk|A)

    Raises:
        ValidationError: Если длины различаются, списки пусты, элементы не
            вероятности или полная вероятность P(A) равна нулю
    """
    validate_equal_length(p_conditionals, p_bs)
    validate_min_size(p_bs, 1)
    for i, (p_conditional, p_b) in enumerate(zip(p_conditionals, p_bs)):
        validate_probability(p_conditional, name=f"p_conditionals[{i}]")
        validate_probability(p_b, name=f"p_bs[{i}]")

    joint = [p_conditional * p_b for p_conditional, p_b in zip(p_conditionals, p_bs)]
    total = sum(joint)
    validate_non_zero(total, name="total probability")

    return [p_joint / total for p_joint in joint]
