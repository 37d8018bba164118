"""Loads the agenda, classifies it and writes every report."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .classificador import classificar_compromissos
from .compromisso import Compromisso
from .escritor import (
    escrever_relatorio_adiados,
    escrever_relatorio_cancelados,
    escrever_relatorio_completo,
    escrever_relatorio_confirmados,
    escrever_resultado,
)
from .leitor import PosicoesRelatorio, ler_agenda, ler_posicoes

ARQUIVO_CONFIRMADOS = "relatconfirmados.txt"
ARQUIVO_ADIADOS = "relatadiados.txt"
ARQUIVO_CANCELADOS = "relatcancelados.txt"
ARQUIVO_COMPLETO = "relatcompromissos.txt"
ARQUIVO_RESULTADO = "resultado.txt"


@dataclass
class GerenciadorRelatorios:
    """Holds the loaded appointments and the classified lists."""

    todos_compromissos: Optional[list[Compromisso]] = None
    confirmados: Optional[list] = None
    adiados: Optional[list] = None
    cancelados: Optional[list] = None
    posicoes: PosicoesRelatorio = field(default_factory=PosicoesRelatorio)

    def carregar_dados(self, agenda_path, posicoes_path) -> None:
        """Load the agenda and the report positions.

        Raises OSError when the agenda cannot be read.
        """
        self.todos_compromissos = ler_agenda(agenda_path)
        self.posicoes = ler_posicoes(posicoes_path)

    def gerar_relatorios(self, diretorio=".") -> None:
        """Classify the appointments and write the four reports into ``diretorio``.

        Does nothing when no agenda has been loaded.
        """
        if self.todos_compromissos is None:
            return
        base = Path(diretorio)
        classificacao = classificar_compromissos(self.todos_compromissos)
        self.confirmados = escrever_relatorio_confirmados(
            classificacao.confirmados, base / ARQUIVO_CONFIRMADOS
        )
        self.adiados = escrever_relatorio_adiados(classificacao.adiados, base / ARQUIVO_ADIADOS)
        self.cancelados = escrever_relatorio_cancelados(
            classificacao.cancelados, base / ARQUIVO_CANCELADOS
        )
        self.todos_compromissos = escrever_relatorio_completo(
            self.todos_compromissos, base / ARQUIVO_COMPLETO
        )

    def calcular_resultado(self, diretorio=".") -> int:
        """Write the final result into ``diretorio`` and return it."""
        resultado = 0
        escrever_resultado(resultado, Path(diretorio) / ARQUIVO_RESULTADO)
        return resultado