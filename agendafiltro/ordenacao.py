"""Sorting and lookup over sequences with three-way comparators."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")
Comparador = Callable[[T, T], int]


def bubble_sort(items: Iterable[T], comparador: Comparador) -> list[T]:
    """Return a new list ordered by ``comparador`` with a stable bubble sort."""
    result = list(items)
    tamanho = len(result)
    for passada in range(tamanho - 1):
        for j in range(tamanho - passada - 1):
            if comparador(result[j], result[j + 1]) > 0:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def ordenar_lista(items: Iterable[T], comparador: Comparador) -> list[T]:
    """Return the items sorted by ``comparador``; the input is left untouched."""
    result = list(items)
    if len(result) < 2:
        return result
    return bubble_sort(result, comparador)


def buscar(items: Iterable[T], comparador: Comparador, alvo) -> Optional[T]:
    """Return the first item for which ``comparador(item, alvo)`` is 0, else None."""
    return next((item for item in items if comparador(item, alvo) == 0), None)