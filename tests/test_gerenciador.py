import pytest

from agendafiltro.gerenciador import (
    ARQUIVO_ADIADOS,
    ARQUIVO_CANCELADOS,
    ARQUIVO_COMPLETO,
    ARQUIVO_CONFIRMADOS,
    ARQUIVO_RESULTADO,
    GerenciadorRelatorios,
)
from agendafiltro.leitor import PosicoesRelatorio

AGENDA = """R2
15/03/2024 09:00
60
true
Planejamento
2

A1
15/03/2024 08:00
120
Calculo
Graduação
3
"""


@pytest.fixture
def arquivos(tmp_path):
    agenda = tmp_path / "agenda.txt"
    agenda.write_text(AGENDA, encoding="utf-8")
    posicoes = tmp_path / "posicoes.txt"
    posicoes.write_text("1\n2\n3\n4\n", encoding="utf-8")
    return agenda, posicoes


def test_new_manager_is_empty():
    ger = GerenciadorRelatorios()
    assert ger.todos_compromissos is None
    assert ger.posicoes == PosicoesRelatorio(0, 0, 0, 0)


def test_carregar_dados(arquivos):
    ger = GerenciadorRelatorios()
    ger.carregar_dados(*arquivos)
    assert [c.id for c in ger.todos_compromissos] == [2, 1]
    assert ger.posicoes == PosicoesRelatorio(1, 2, 3, 4)


def test_carregar_dados_missing_agenda(tmp_path):
    ger = GerenciadorRelatorios()
    with pytest.raises(FileNotFoundError):
        ger.carregar_dados(tmp_path / "nada.txt", tmp_path / "nada2.txt")


def test_gerar_relatorios_writes_all_reports(arquivos, tmp_path):
    saida = tmp_path / "saida"
    saida.mkdir()
    ger = GerenciadorRelatorios()
    ger.carregar_dados(*arquivos)
    ger.gerar_relatorios(saida)
    nomes = {p.name for p in saida.iterdir()}
    assert nomes == {ARQUIVO_CONFIRMADOS, ARQUIVO_ADIADOS, ARQUIVO_CANCELADOS, ARQUIVO_COMPLETO}
    assert (saida / ARQUIVO_ADIADOS).read_text(encoding="utf-8") == ""
    assert (saida / ARQUIVO_CANCELADOS).read_text(encoding="utf-8") == ""
    assert ger.adiados == [] and ger.cancelados == []
    assert [c.id for c in ger.confirmados] == [1, 2]
    assert [c.id for c in ger.todos_compromissos] == [1, 2]
    confirmados = (saida / ARQUIVO_CONFIRMADOS).read_text(encoding="utf-8")
    assert "Aula de Calculo" in confirmados
    assert "Reunião de Departamento" in confirmados


def test_gerar_relatorios_without_data_writes_nothing(tmp_path):
    ger = GerenciadorRelatorios()
    ger.gerar_relatorios(tmp_path)
    assert list(tmp_path.iterdir()) == []
    assert ger.confirmados is None


def test_calcular_resultado(tmp_path):
    ger = GerenciadorRelatorios()
    assert ger.calcular_resultado(tmp_path) == 0
    assert (tmp_path / ARQUIVO_RESULTADO).read_text(encoding="utf-8").strip() == "0"