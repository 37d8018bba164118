"""Reading the agenda file and the report positions file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .common import string_para_bool, string_para_int, trim_string
from .compromisso import (
    Aula,
    Compromisso,
    Evento,
    Orientacao,
    Particular,
    Reuniao,
    nivel_de_texto,
)
from .datas import ler_data, ler_hora

_DATA_HORA = re.compile(r"[ \t\n\v\f\r]*(\S{1,10})(?:[ \t\n\v\f\r]*(\S{1,5}))?")


@dataclass
class PosicoesRelatorio:
    """Positions read from the positions file, one per report."""

    i: int = 0
    j: int = 0
    k: int = 0
    m: int = 0


def _proxima(linhas: Iterator[str]) -> str:
    return next(linhas, "")


def _campo(linhas: Iterator[str]) -> str:
    return trim_string(_proxima(linhas))


def _data_hora(linha: str) -> tuple[str, str]:
    match = _DATA_HORA.match(linha)
    if match is None:
        return "", ""
    return match.group(1), match.group(2) or ""


def parse_compromisso(linha_tipo: Optional[str], linhas: Iterable[str]) -> Optional[Compromisso]:
    """Build one appointment from its header line and the lines that follow it.

    Returns None for a header that is too short or names an unknown kind.
    """
    if linha_tipo is None or len(linha_tipo) < 2:
        return None
    linhas = iter(linhas)

    tipo = linha_tipo[0]
    id_ = string_para_int(linha_tipo[1:])

    data_str, hora_str = _data_hora(_proxima(linhas))
    data = ler_data(data_str)
    hora = ler_hora(hora_str)
    duracao = string_para_int(_proxima(linhas))

    if tipo == "A":
        disciplina = _campo(linhas)
        nivel = nivel_de_texto(_campo(linhas))
        prioridade = string_para_int(_proxima(linhas))
        return Aula(id_, data, hora, duracao, disciplina, nivel, prioridade)

    if tipo == "O":
        adiavel = string_para_bool(_campo(linhas))
        nome = _campo(linhas)
        nivel = nivel_de_texto(_campo(linhas))
        defesa_data_str, defesa_hora_str = _data_hora(_proxima(linhas))
        prioridade = string_para_int(_proxima(linhas))
        return Orientacao(
            id_, data, hora, duracao, adiavel, nome, nivel,
            ler_data(defesa_data_str), ler_hora(defesa_hora_str), prioridade,
        )

    if tipo == "R":
        adiavel = string_para_bool(_campo(linhas))
        assunto = _campo(linhas)
        prioridade = string_para_int(_proxima(linhas))
        return Reuniao(id_, data, hora, duracao, adiavel, assunto, prioridade)

    if tipo == "E":
        nome_evento = _campo(linhas)
        local = _campo(linhas)
        prioridade = string_para_int(_proxima(linhas))
        return Evento(id_, data, hora, duracao, nome_evento, local, prioridade)

    if tipo == "P":
        adiavel = string_para_bool(_campo(linhas))
        motivo = _campo(linhas)
        local = _campo(linhas)
        prioridade = string_para_int(_proxima(linhas))
        return Particular(id_, data, hora, duracao, adiavel, motivo, local, prioridade)

    return None


def ler_agenda(path) -> list[Compromisso]:
    """Read every appointment from an agenda file.

    Raises OSError when the file cannot be opened.
    """
    compromissos: list[Compromisso] = []
    with open(path, "r", encoding="utf-8") as arquivo:
        linhas = iter(arquivo)
        for linha in linhas:
            linha = trim_string(linha)
            if not linha:
                continue
            comp = parse_compromisso(linha, linhas)
            if comp is not None:
                compromissos.append(comp)
            # the blank separator line after each appointment
            next(linhas, None)
    return compromissos


def ler_posicoes(path) -> PosicoesRelatorio:
    """Read the four report positions; missing values and a missing file give 0."""
    try:
        with open(path, "r", encoding="utf-8") as arquivo:
            valores = [string_para_int(linha) for _, linha in zip(range(4), arquivo)]
    except OSError:
        return PosicoesRelatorio()
    return PosicoesRelatorio(*valores)