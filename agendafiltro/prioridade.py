"""Priority computation and ordering between appointments."""

from __future__ import annotations

from .compromisso import Compromisso, TipoCompromisso
from .datas import DateTime, comparar_datetime

_NOMES_TIPO = {
    TipoCompromisso.AULA: "Aula",
    TipoCompromisso.ORIENTACAO: "Orientação",
    TipoCompromisso.REUNIAO: "Reunião",
    TipoCompromisso.EVENTO: "Evento",
    TipoCompromisso.PARTICULAR: "Particular",
}

# Tie-break rank by kind: meeting, event, class, private, supervision.
_RANK_TIPO = {
    TipoCompromisso.REUNIAO: 5,
    TipoCompromisso.EVENTO: 4,
    TipoCompromisso.AULA: 3,
    TipoCompromisso.PARTICULAR: 2,
    TipoCompromisso.ORIENTACAO: 1,
}


def calcular_prioridade_final(comp: Compromisso) -> int:
    """Final priority of an appointment."""
    return comp.calcular_prioridade()


def comparar_prioridades(c1: Compromisso, c2: Compromisso) -> int:
    """Positive when ``c1`` has the higher priority, negative when ``c2`` has."""
    return calcular_prioridade_final(c1) - calcular_prioridade_final(c2)


def comparar_prioridades_com_desempate(c1: Compromisso, c2: Compromisso) -> int:
    """Compare by priority, then start, then kind, then description."""
    cmp_prioridade = comparar_prioridades(c1, c2)
    if cmp_prioridade != 0:
        return cmp_prioridade

    cmp_inicio = comparar_datetime(DateTime(c1.data, c1.hora), DateTime(c2.data, c2.hora))
    if cmp_inicio != 0:
        return cmp_inicio

    if c1.tipo != c2.tipo:
        rank1 = _RANK_TIPO.get(c1.tipo, 1)
        rank2 = _RANK_TIPO.get(c2.tipo, 1)
        if rank1 != rank2:
            return rank2 - rank1

    desc1 = c1.obter_descricao()
    desc2 = c2.obter_descricao()
    return (desc1 > desc2) - (desc1 < desc2)


def obter_nome_tipo_prioridade(tipo: TipoCompromisso) -> str:
    """Display name of an appointment kind."""
    return _NOMES_TIPO.get(tipo, "Desconhecido")