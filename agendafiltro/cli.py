"""Command line entry point: filter an agenda and write the reports."""

from __future__ import annotations

import argparse

from .gerenciador import (
    ARQUIVO_ADIADOS,
    ARQUIVO_CANCELADOS,
    ARQUIVO_COMPLETO,
    ARQUIVO_CONFIRMADOS,
    ARQUIVO_RESULTADO,
    GerenciadorRelatorios,
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agendafiltro", description="Filtra compromissos e gera relatórios."
    )
    parser.add_argument("--agenda", default="exemplos/agenda.txt")
    parser.add_argument("--posicoes", default="exemplos/posicoes.txt")
    parser.add_argument("--saida", default=".")
    return parser


def main(argv=None) -> int:
    """Run the whole pipeline; returns the process exit status."""
    args = _parser().parse_args(argv)

    print("=== SISTEMA DE FILTRO DE COMPROMISSOS ===")
    print("Iniciando...")

    gerenciador = GerenciadorRelatorios()

    print("Carregando dados...")
    try:
        gerenciador.carregar_dados(args.agenda, args.posicoes)
    except OSError:
        print("Erro: Não foi possível carregar os compromissos.")
        return 1

    print(f"Compromissos carregados: {len(gerenciador.todos_compromissos)}")

    print("Gerando relatórios...")
    gerenciador.gerar_relatorios(args.saida)

    print("Calculando resultado final...")
    gerenciador.calcular_resultado(args.saida)

    print("=== PROCESSAMENTO CONCLUÍDO ===")
    print("Relatórios gerados:")
    for nome in (
        ARQUIVO_CONFIRMADOS,
        ARQUIVO_ADIADOS,
        ARQUIVO_CANCELADOS,
        ARQUIVO_COMPLETO,
        ARQUIVO_RESULTADO,
    ):
        print(f"- {nome}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())