"""Sorting appointments into confirmed, postponed and cancelled."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .compromisso import Compromisso
from .conflito import compromissos_conflitam
from .prioridade import calcular_prioridade_final


@dataclass
class ResultadoClassificacao:
    """Outcome of classifying an agenda."""

    confirmados: list = field(default_factory=list)
    adiados: list = field(default_factory=list)
    cancelados: list = field(default_factory=list)


def classificar_compromissos(compromissos: Iterable[Compromisso]) -> ResultadoClassificacao:
    """Classify appointments; every appointment is currently confirmed."""
    return ResultadoClassificacao(confirmados=list(compromissos))


def encontrar_conflitante_principal(
    comp: Optional[Compromisso], compromissos: Iterable[Compromisso]
) -> Optional[Compromisso]:
    """The highest-priority appointment conflicting with ``comp``, or None."""
    if comp is None:
        return None
    conflitantes = [outro for outro in compromissos if compromissos_conflitam(comp, outro)]
    if not conflitantes:
        return None
    return max(conflitantes, key=calcular_prioridade_final)