"""Writing the report files."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from .compromisso import Compromisso
from .relatorios import (
    CompromissoAdiado,
    CompromissoCancelado,
    adiados_formatar_linha,
    adiados_ordenar,
    cancelados_formatar_linha,
    cancelados_ordenar,
    completo_formatar_linha,
    completo_ordenar,
    confirmados_formatar_linha,
    confirmados_ordenar,
)

T = TypeVar("T")


def _escrever(
    itens: Iterable[T],
    path,
    ordenar: Callable[[Iterable[T]], list[T]],
    formatar: Callable[[T], Optional[str]],
    separador: str,
) -> list[T]:
    ordenados = ordenar(itens)
    with open(path, "w", encoding="utf-8") as arquivo:
        for item in ordenados:
            linha = formatar(item)
            if linha is not None:
                arquivo.write(linha + separador)
    return ordenados


def escrever_relatorio_confirmados(compromissos: Iterable[Compromisso], path) -> list[Compromisso]:
    """Write the confirmed report; returns the appointments in the order written."""
    return _escrever(compromissos, path, confirmados_ordenar, confirmados_formatar_linha, "\n")


def escrever_relatorio_adiados(
    compromissos: Iterable[CompromissoAdiado], path
) -> list[CompromissoAdiado]:
    """Write the postponed report; returns the entries in the order written."""
    return _escrever(compromissos, path, adiados_ordenar, adiados_formatar_linha, "\n")


def escrever_relatorio_cancelados(
    compromissos: Iterable[CompromissoCancelado], path
) -> list[CompromissoCancelado]:
    """Write the cancelled report; returns the entries in the order written."""
    return _escrever(compromissos, path, cancelados_ordenar, cancelados_formatar_linha, "\n")


def escrever_relatorio_completo(compromissos: Iterable[Compromisso], path) -> list[Compromisso]:
    """Write the complete report; returns the appointments in the order written."""
    return _escrever(compromissos, path, completo_ordenar, completo_formatar_linha, "\n\n")


def escrever_resultado(resultado: int, path) -> None:
    """Write the final result number on a line of its own."""
    with open(path, "w", encoding="utf-8") as arquivo:
        arquivo.write(f"{resultado}\n")