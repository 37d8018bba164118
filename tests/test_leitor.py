import pytest

from agendafiltro.compromisso import Evento, Nivel, TipoCompromisso
from agendafiltro.datas import Data, Hora
from agendafiltro.leitor import PosicoesRelatorio, ler_agenda, ler_posicoes, parse_compromisso

AGENDA = """A1
15/03/2024 08:00
120
Calculo
Graduação
3

R2
15/03/2024 09:00
60
true
Planejamento
2

O3
16/03/2024 10:00
45
false
Maria
Mestrado
20/06/2024 14:00
4

E4
17/03/2024 07:30
2
Congresso
Auditorio
5

P5
18/03/2024 18:00
30
1
Dentista
Clinica
1
"""


def _escrever(tmp_path, texto, nome="agenda.txt"):
    caminho = tmp_path / nome
    caminho.write_text(texto, encoding="utf-8")
    return caminho


def test_ler_agenda_reads_all_kinds_in_order(tmp_path):
    comps = ler_agenda(_escrever(tmp_path, AGENDA))
    assert [c.id for c in comps] == [1, 2, 3, 4, 5]
    assert [c.tipo for c in comps] == [
        TipoCompromisso.AULA,
        TipoCompromisso.REUNIAO,
        TipoCompromisso.ORIENTACAO,
        TipoCompromisso.EVENTO,
        TipoCompromisso.PARTICULAR,
    ]


def test_aula_fields(tmp_path):
    aula = ler_agenda(_escrever(tmp_path, AGENDA))[0]
    assert aula.nome_disciplina == "Calculo"
    assert aula.nivel is Nivel.GRADUACAO
    assert aula.data == Data(15, 3, 2024)
    assert aula.hora == Hora(8, 0)
    assert aula.duracao_minutos == 120
    assert aula.grau_prioridade == 3
    assert aula.adiavel is False


def test_reuniao_and_particular_fields(tmp_path):
    comps = ler_agenda(_escrever(tmp_path, AGENDA))
    reuniao, particular = comps[1], comps[4]
    assert reuniao.adiavel is True
    assert reuniao.assunto == "Planejamento"
    assert particular.adiavel is True
    assert particular.motivo == "Dentista"
    assert particular.local == "Clinica"


def test_orientacao_fields(tmp_path):
    orientacao = ler_agenda(_escrever(tmp_path, AGENDA))[2]
    assert orientacao.adiavel is False
    assert orientacao.nome_orientado == "Maria"
    assert orientacao.nivel is Nivel.MESTRADO
    assert orientacao.data_defesa == Data(20, 6, 2024)
    assert orientacao.hora_defesa == Hora(14, 0)
    assert orientacao.grau_prioridade == 4


def test_evento_duration_matches_constructor(tmp_path):
    evento = ler_agenda(_escrever(tmp_path, AGENDA))[3]
    esperado = Evento(4, Data(17, 3, 2024), Hora(7, 30), 2, "Congresso", "Auditorio", 5)
    assert evento.duracao_dias == 2
    assert evento.duracao_minutos == esperado.duracao_minutos
    assert evento.local == "Auditorio"


def test_unknown_kind_is_skipped(tmp_path):
    texto = "X9\n15/03/2024 08:00\n30\n\n" + AGENDA
    comps = ler_agenda(_escrever(tmp_path, texto))
    assert [c.id for c in comps] == [1, 2, 3, 4, 5]


def test_leading_blank_lines_are_skipped(tmp_path):
    comps = ler_agenda(_escrever(tmp_path, "\n\n" + AGENDA))
    assert len(comps) == 5


def test_missing_agenda_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ler_agenda(tmp_path / "nada.txt")


def test_parse_compromisso_short_header_is_none():
    assert parse_compromisso("A", []) is None
    assert parse_compromisso(None, []) is None


def test_parse_compromisso_unknown_level_defaults_to_graduacao():
    linhas = ["01/02/2024 10:15\n", "50\n", "Fisica\n", "Doutorado\n", "2\n"]
    aula = parse_compromisso("A7", linhas)
    assert aula.id == 7
    assert aula.nivel is Nivel.GRADUACAO
    assert aula.hora == Hora(10, 15)


def test_parse_compromisso_consumes_shared_iterator():
    linhas = iter(["01/02/2024 10:15\n", "50\n", "true\n", "Tema\n", "3\n", "resto\n"])
    reuniao = parse_compromisso("R8", linhas)
    assert reuniao.assunto == "Tema"
    assert next(linhas) == "resto\n"


def test_ler_posicoes_full(tmp_path):
    caminho = _escrever(tmp_path, "1\n2\n3\n4\n", "posicoes.txt")
    assert ler_posicoes(caminho) == PosicoesRelatorio(1, 2, 3, 4)


def test_ler_posicoes_partial_and_missing(tmp_path):
    caminho = _escrever(tmp_path, "7\n", "posicoes.txt")
    assert ler_posicoes(caminho) == PosicoesRelatorio(7, 0, 0, 0)
    assert ler_posicoes(tmp_path / "nada.txt") == PosicoesRelatorio()