"""Calendar date, time of day and their combination."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import total_ordering

_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_DIAS_POR_MES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _scan_ints(text: str, sep: str, count: int) -> list[int]:
    """Read up to ``count`` integers separated by ``sep``, stopping at the first mismatch."""
    values: list[int] = []
    pos = 0
    for index in range(count):
        if index:
            if not text.startswith(sep, pos):
                break
            pos += len(sep)
        match = _INT.match(text, pos)
        if match is None:
            break
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


@total_ordering
@dataclass(frozen=True)
class Data:
    """A calendar date: day, month, year."""

    dia: int = 0
    mes: int = 0
    ano: int = 0

    def __str__(self) -> str:
        return f"{self.dia:02d}/{self.mes:02d}/{self.ano:04d}"

    def __lt__(self, other: "Data") -> bool:
        if not isinstance(other, Data):
            return NotImplemented
        return comparar_datas(self, other) < 0


@total_ordering
@dataclass(frozen=True)
class Hora:
    """A time of day: hour and minute."""

    hora: int = 0
    minuto: int = 0

    def __str__(self) -> str:
        return f"{self.hora:02d}:{self.minuto:02d}"

    def __lt__(self, other: "Hora") -> bool:
        if not isinstance(other, Hora):
            return NotImplemented
        return comparar_horas(self, other) < 0


@total_ordering
@dataclass(frozen=True)
class DateTime:
    """A date together with a time of day."""

    data: Data = Data()
    hora: Hora = Hora()

    def __str__(self) -> str:
        return f"{self.data} {self.hora}"

    def __lt__(self, other: "DateTime") -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return comparar_datetime(self, other) < 0


def ler_data(text: str | None) -> Data:
    """Parse ``dd/mm/yyyy``; fields that cannot be read stay 0."""
    if text is None:
        return Data()
    return Data(*_scan_ints(text, "/", 3))


def comparar_datas(d1: Data, d2: Data) -> int:
    """Negative, zero or positive as ``d1`` is before, equal to or after ``d2``."""
    if d1.ano != d2.ano:
        return d1.ano - d2.ano
    if d1.mes != d2.mes:
        return d1.mes - d2.mes
    return d1.dia - d2.dia


def data_valida(data: Data) -> bool:
    """Check month and day ranges; leap years are not considered."""
    if data.mes < 1 or data.mes > 12:
        return False
    if data.dia < 1:
        return False
    return data.dia <= _DIAS_POR_MES[data.mes - 1]


def ler_hora(text: str | None) -> Hora:
    """Parse ``hh:mm``; fields that cannot be read stay 0."""
    if text is None:
        return Hora()
    return Hora(*_scan_ints(text, ":", 2))


def comparar_horas(h1: Hora, h2: Hora) -> int:
    """Negative, zero or positive as ``h1`` is before, equal to or after ``h2``."""
    if h1.hora != h2.hora:
        return h1.hora - h2.hora
    return h1.minuto - h2.minuto


def hora_valida(hora: Hora) -> bool:
    """Check that hour is 0-23 and minute is 0-59."""
    return 0 <= hora.hora < 24 and 0 <= hora.minuto < 60


def adicionar_minutos(hora: Hora, minutos: int) -> Hora:
    """Add minutes to a time, wrapping around midnight."""
    total = hora.hora * 60 + hora.minuto + minutos
    return Hora(_cmod(_cdiv(total, 60), 24), _cmod(total, 60))


def diferenca_minutos(h1: Hora, h2: Hora) -> int:
    """Minutes from ``h2`` to ``h1``."""
    return (h1.hora * 60 + h1.minuto) - (h2.hora * 60 + h2.minuto)


def ler_datetime(str_data: str | None, str_hora: str | None) -> DateTime:
    """Parse a date string and a time string into a DateTime."""
    return DateTime(ler_data(str_data), ler_hora(str_hora))


def comparar_datetime(dt1: DateTime, dt2: DateTime) -> int:
    """Compare by date first, then by time."""
    cmp_data = comparar_datas(dt1.data, dt2.data)
    if cmp_data != 0:
        return cmp_data
    return comparar_horas(dt1.hora, dt2.hora)


def adicionar_minutos_datetime(dt: DateTime, minutos: int) -> DateTime:
    """Add minutes; the day moves forward by one when the hour wraps."""
    nova_hora = adicionar_minutos(dt.hora, minutos)
    data = dt.data
    if nova_hora.hora < dt.hora.hora:
        data = replace(data, dia=data.dia + 1)
    return DateTime(data, nova_hora)


def calcular_fim_compromisso(inicio: DateTime, duracao_minutos: int) -> DateTime:
    """End of an appointment starting at ``inicio`` and lasting ``duracao_minutos``."""
    return adicionar_minutos_datetime(inicio, duracao_minutos)


def diferenca_minutos_datetime(dt1: DateTime, dt2: DateTime) -> int:
    """Minutes between the times of day, ignoring the dates."""
    return diferenca_minutos(dt1.hora, dt2.hora)