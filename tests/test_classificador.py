from agendafiltro.classificador import (
    classificar_compromissos,
    encontrar_conflitante_principal,
)
from agendafiltro.compromisso import Aula, Nivel, Reuniao
from agendafiltro.datas import Data, Hora


def _aula(id, hora, grau=2):
    return Aula(id, Data(10, 3, 2024), hora, 60, "Fisica", Nivel.GRADUACAO, grau)


def _reuniao(id, hora, grau=3):
    return Reuniao(id, Data(10, 3, 2024), hora, 60, True, "Pauta", grau)


def test_all_confirmed_in_order():
    comps = [_aula(1, Hora(8, 0)), _reuniao(2, Hora(8, 30)), _aula(3, Hora(14, 0))]
    resultado = classificar_compromissos(comps)
    assert resultado.confirmados == comps
    assert resultado.adiados == []
    assert resultado.cancelados == []


def test_classification_does_not_alias_input():
    comps = [_aula(1, Hora(8, 0))]
    resultado = classificar_compromissos(comps)
    resultado.confirmados.clear()
    assert len(comps) == 1


def test_conflitante_principal_is_highest_priority():
    alvo = _aula(1, Hora(8, 0))
    fraco = _aula(2, Hora(8, 15), grau=1)
    forte = _reuniao(3, Hora(8, 30), grau=5)
    longe = _reuniao(4, Hora(15, 0), grau=9)
    achado = encontrar_conflitante_principal(alvo, [alvo, fraco, forte, longe])
    assert achado is forte


def test_conflitante_principal_none_without_conflicts():
    alvo = _aula(1, Hora(8, 0))
    assert encontrar_conflitante_principal(alvo, [alvo, _reuniao(2, Hora(12, 0))]) is None


def test_conflitante_principal_none_for_missing_appointment():
    assert encontrar_conflitante_principal(None, [_aula(1, Hora(8, 0))]) is None