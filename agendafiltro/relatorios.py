"""Ordering and line formatting for each report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .compromisso import Compromisso, TipoCompromisso
from .datas import DateTime, comparar_datetime
from .ordenacao import ordenar_lista
from .prioridade import calcular_prioridade_final


@dataclass
class CompromissoAdiado:
    """A postponed appointment and the one that forced it."""

    compromisso: Compromisso
    conflitante: Optional[Compromisso] = None


@dataclass
class CompromissoCancelado:
    """A cancelled appointment and the one that forced it."""

    compromisso: Compromisso
    conflitante: Optional[Compromisso] = None


def _inicio(comp: Compromisso) -> DateTime:
    return DateTime(comp.data, comp.hora)


def _formatar_afetado(item) -> Optional[str]:
    if item is None or item.compromisso is None:
        return None
    comp = item.compromisso
    conflitante_id = item.conflitante.id if item.conflitante is not None else 0
    return (
        f"{comp.id:06d}\n{comp.obter_descricao()}\n"
        f"{calcular_prioridade_final(comp)}\n{conflitante_id:06d}\n"
    )


def confirmados_ordenar(compromissos: Iterable[Compromisso]) -> list[Compromisso]:
    """Confirmed appointments by start, earliest first."""
    return ordenar_lista(compromissos, lambda a, b: comparar_datetime(_inicio(a), _inicio(b)))


def confirmados_formatar_linha(comp: Optional[Compromisso]) -> Optional[str]:
    """Start, identifier and description, one per line."""
    if comp is None:
        return None
    return f"{comp.data} {comp.hora}\n{comp.id:06d}\n{comp.obter_descricao()}\n"


def adiados_ordenar(compromissos: Iterable[CompromissoAdiado]) -> list[CompromissoAdiado]:
    """Postponed appointments by priority, highest first."""
    return ordenar_lista(
        compromissos,
        lambda a, b: calcular_prioridade_final(b.compromisso)
        - calcular_prioridade_final(a.compromisso),
    )


def adiados_formatar_linha(comp_adiado: Optional[CompromissoAdiado]) -> Optional[str]:
    """Identifier, description, priority and conflicting identifier."""
    return _formatar_afetado(comp_adiado)


def cancelados_ordenar(compromissos: Iterable[CompromissoCancelado]) -> list[CompromissoCancelado]:
    """Cancelled appointments by duration, shortest first."""
    return ordenar_lista(
        compromissos,
        lambda a, b: a.compromisso.duracao_minutos - b.compromisso.duracao_minutos,
    )


def cancelados_formatar_linha(comp_cancelado: Optional[CompromissoCancelado]) -> Optional[str]:
    """Identifier, description, priority and conflicting identifier."""
    return _formatar_afetado(comp_cancelado)


def completo_ordenar(compromissos: Iterable[Compromisso]) -> list[Compromisso]:
    """All appointments by identifier, ascending."""
    return ordenar_lista(compromissos, lambda a, b: a.id - b.id)


def _detalhes_completo(comp: Compromisso) -> list[str]:
    tipo = comp.tipo
    if tipo is TipoCompromisso.AULA:
        return [f"Nível: {comp.nivel.rotulo()}"]
    if tipo is TipoCompromisso.ORIENTACAO:
        return [f"Nível: {comp.nivel.rotulo()}", "Assunto: Data da Defesa"]
    if tipo is TipoCompromisso.REUNIAO:
        return [f"Assunto: {comp.assunto}"]
    if tipo in (TipoCompromisso.EVENTO, TipoCompromisso.PARTICULAR):
        return [f"Local: {comp.local}"]
    return []


def completo_formatar_linha(comp: Optional[Compromisso]) -> Optional[str]:
    """Full entry of the complete report, without a trailing newline."""
    if comp is None:
        return None
    fim = comp.obter_fim()
    linhas = [
        f"{comp.id:06d}: {comp.obter_descricao()}",
        f"Início: {comp.data} {comp.hora}",
        f"Fim: {fim.data} {fim.hora}",
        f"Prioridade: {calcular_prioridade_final(comp)}",
        *_detalhes_completo(comp),
    ]
    return "\n".join(linhas)