"""Detection of overlapping appointments."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Optional

from .compromisso import Compromisso
from .datas import DateTime
from .prioridade import calcular_prioridade_final


@dataclass
class Conflito:
    """Two overlapping appointments with their priorities."""

    comp1: Compromisso
    comp2: Compromisso
    prioridade_comp1: int
    prioridade_comp2: int


def compromissos_conflitam(c1: Optional[Compromisso], c2: Optional[Compromisso]) -> bool:
    """True when two distinct appointments on the same day overlap in time."""
    if c1 is None or c2 is None:
        return False
    if c1.id == c2.id:
        return False
    if c1.data != c2.data:
        return False

    inicio1 = DateTime(c1.data, c1.hora)
    inicio2 = DateTime(c2.data, c2.hora)
    fim1 = c1.obter_fim()
    fim2 = c2.obter_fim()

    return (inicio1 < fim2 and fim1 > inicio2) or (inicio2 < fim1 and fim2 > inicio1)


def detectar_todos_conflitos(compromissos: Iterable[Compromisso]) -> list[Conflito]:
    """Every conflicting pair, in input order."""
    return [
        Conflito(c1, c2, calcular_prioridade_final(c1), calcular_prioridade_final(c2))
        for c1, c2 in combinations(list(compromissos), 2)
        if compromissos_conflitam(c1, c2)
    ]