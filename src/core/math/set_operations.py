"""
Set Operations — операции над множествами, представленными списками

Порядок элементов сохраняется (порядок первого появления),
поэтому результаты детерминированы и пригодны для печати.
"""

from typing import Hashable, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)


def union(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """
    Объединение A ∪ B: элементы A, затем B, без повторов.

    Examples:
        >>> union(["Mercury", "Venus"], ["Mercury", "Carbon"])
        ['Mercury', 'Venus', 'Carbon']
    """
    result: list[T] = []
    seen: set[T] = set()

    for element in [*a, *b]:
        if element not in seen:
            seen.add(element)
            result.append(element)

    return result


def intersection(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Пересечение A ∩ B в порядке элементов A."""
    members = set(b)
    return [element for element in a if element in members]


def complement(universe: Sequence[T], subset: Sequence[T]) -> list[T]:
    """
    Дополнение subset относительно universe: элементы universe, не входящие в subset.

    subset не обязан быть подмножеством universe.
    """
    excluded = set(subset)
    return [element for element in universe if element not in excluded]
