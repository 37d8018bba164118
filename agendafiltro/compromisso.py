"""Appointments: the common base and the five concrete kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .common import MAX_STRING, formatar_id
from .datas import Data, DateTime, Hora


def _truncar(text: str) -> str:
    """Cut text to the longest length a field may hold."""
    return text[: MAX_STRING - 1]


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class TipoCompromisso(Enum):
    """Kind of appointment."""

    AULA = 0
    ORIENTACAO = 1
    REUNIAO = 2
    EVENTO = 3
    PARTICULAR = 4

    @property
    def fator_base(self) -> int:
        """Base multiplying factor used in the priority."""
        return _FATORES[self]

    @property
    def adiavel_por_padrao(self) -> bool:
        """Classes and events can never be postponed."""
        return self not in (TipoCompromisso.AULA, TipoCompromisso.EVENTO)


_FATORES = {
    TipoCompromisso.AULA: 2,
    TipoCompromisso.ORIENTACAO: 1,
    TipoCompromisso.REUNIAO: 4,
    TipoCompromisso.EVENTO: 3,
    TipoCompromisso.PARTICULAR: 2,
}


class Nivel(Enum):
    """Academic level."""

    GRADUACAO = 0
    ESPECIALIZACAO = 1
    MESTRADO = 2

    def rotulo(self) -> str:
        """Human-readable label of the level."""
        return _ROTULOS[self]


_ROTULOS = {
    Nivel.GRADUACAO: "Graduação",
    Nivel.ESPECIALIZACAO: "Especialização",
    Nivel.MESTRADO: "Mestrado",
}


def nivel_de_texto(text: str) -> Nivel:
    """Map a label to its level; anything unknown becomes GRADUACAO."""
    for nivel, rotulo in _ROTULOS.items():
        if text == rotulo:
            return nivel
    return Nivel.GRADUACAO


@dataclass(eq=False)
class Compromisso:
    """An appointment with a start, a duration and a priority grade."""

    id: int
    tipo: TipoCompromisso
    data: Data
    hora: Hora
    duracao_minutos: int
    grau_prioridade: int
    fator_multiplicador: int = field(init=False)
    adiavel: bool = field(init=False)

    def __post_init__(self) -> None:
        self.fator_multiplicador = self.tipo.fator_base
        self.adiavel = self.tipo.adiavel_por_padrao

    def calcular_prioridade(self) -> int:
        """Grade times factor; the factor grows by one when it cannot be postponed."""
        fator = self.fator_multiplicador
        if not self.adiavel and self.tipo not in (
            TipoCompromisso.AULA,
            TipoCompromisso.EVENTO,
        ):
            fator += 1
        return self.grau_prioridade * fator

    def obter_descricao(self) -> str:
        """Short description used in the reports."""
        return "Compromisso desconhecido"

    def obter_fim(self) -> DateTime:
        """End date and time; the day moves forward at most once."""
        total = self.hora.minuto + self.duracao_minutos
        hora = self.hora.hora + _cdiv(total, 60)
        minuto = total - 60 * _cdiv(total, 60)
        dia = self.data.dia
        if hora >= 24:
            hora -= 24
            dia += 1
        return DateTime(Data(dia, self.data.mes, self.data.ano), Hora(hora, minuto))

    def _detalhes(self) -> list[str]:
        return []

    def formatar_completo(self) -> str:
        """Full multi-line description of the appointment."""
        fim = self.obter_fim()
        linhas = [
            f"{formatar_id(self.id)}: {self.obter_descricao()}",
            f"Início: {self.data} {self.hora}",
            f"Fim: {fim.data} {fim.hora}",
            f"Prioridade: {self.calcular_prioridade()}",
            *self._detalhes(),
        ]
        return "\n".join(linhas) + "\n"


class Aula(Compromisso):
    """A class to be taught; never postponable."""

    def __init__(self, id: int, data: Data, hora: Hora, duracao_minutos: int,
                 nome_disciplina: str, nivel: Nivel, grau_prioridade: int) -> None:
        super().__init__(id, TipoCompromisso.AULA, data, hora,
                         duracao_minutos, grau_prioridade)
        self.nome_disciplina = _truncar(nome_disciplina)
        self.nivel = nivel

    def obter_descricao(self) -> str:
        return _truncar(f"Aula de {self.nome_disciplina}")

    def _detalhes(self) -> list[str]:
        return [f"Nível: {self.nivel.rotulo()}"]


class Orientacao(Compromisso):
    """A supervision meeting with a student."""

    def __init__(self, id: int, data: Data, hora: Hora, duracao_minutos: int,
                 adiavel: bool, nome_orientado: str, nivel: Nivel,
                 data_defesa: Data, hora_defesa: Hora, grau_prioridade: int) -> None:
        super().__init__(id, TipoCompromisso.ORIENTACAO, data, hora,
                         duracao_minutos, grau_prioridade)
        self.adiavel = adiavel
        self.nome_orientado = _truncar(nome_orientado)
        self.nivel = nivel
        self.data_defesa = data_defesa
        self.hora_defesa = hora_defesa

    def obter_descricao(self) -> str:
        return _truncar(f"Orientação de {self.nome_orientado}")

    def _detalhes(self) -> list[str]:
        return [
            f"Nível: {self.nivel.rotulo()}",
            f"Data da Defesa: {self.data_defesa} {self.hora_defesa}",
        ]


class Reuniao(Compromisso):
    """A department meeting."""

    def __init__(self, id: int, data: Data, hora: Hora, duracao_minutos: int,
                 adiavel: bool, assunto: str, grau_prioridade: int) -> None:
        super().__init__(id, TipoCompromisso.REUNIAO, data, hora,
                         duracao_minutos, grau_prioridade)
        self.adiavel = adiavel
        self.assunto = _truncar(assunto)

    def obter_descricao(self) -> str:
        return "Reunião de Departamento"

    def _detalhes(self) -> list[str]:
        return [f"Assunto: {self.assunto}"]


class Evento(Compromisso):
    """An event lasting whole days; never postponable."""

    def __init__(self, id: int, data: Data, hora: Hora, duracao_dias: int,
                 nome_evento: str, local: str, grau_prioridade: int) -> None:
        super().__init__(id, TipoCompromisso.EVENTO, data, hora,
                         duracao_dias * 24 * 60, grau_prioridade)
        self.nome_evento = _truncar(nome_evento)
        self.local = _truncar(local)
        self.duracao_dias = duracao_dias

    def obter_descricao(self) -> str:
        return _truncar(self.nome_evento)

    def _detalhes(self) -> list[str]:
        return [f"Local: {self.local}"]


class Particular(Compromisso):
    """A private appointment."""

    def __init__(self, id: int, data: Data, hora: Hora, duracao_minutos: int,
                 adiavel: bool, motivo: str, local: str, grau_prioridade: int) -> None:
        super().__init__(id, TipoCompromisso.PARTICULAR, data, hora,
                         duracao_minutos, grau_prioridade)
        self.adiavel = adiavel
        self.motivo = _truncar(motivo)
        self.local = _truncar(local)

    def obter_descricao(self) -> str:
        return _truncar(self.motivo)

    def _detalhes(self) -> list[str]:
        return [f"Local: {self.local}"]