# agendafiltro

agendafiltro reads a plain-text agenda of appointments: classes, supervisions,
meetings, events and private appointments. It works out the priority of each
one and writes a set of report files.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
agendafiltro [--agenda PATH] [--posicoes PATH] [--saida DIR]
```

| Option       | Default                 | Meaning                                |
|--------------|-------------------------|----------------------------------------|
| `--agenda`   | `exemplos/agenda.txt`   | the agenda file to read                |
| `--posicoes` | `exemplos/posicoes.txt` | the report positions file to read      |
| `--saida`    | `.`                     | the directory the reports are written to |

The command prints its progress and the number of appointments loaded, then
writes these files to the output directory:

- `relatconfirmados.txt`: confirmed appointments by start date and time, each
  as start, six-digit id and description
- `relatadiados.txt`: postponed appointments by priority, highest first
- `relatcancelados.txt`: cancelled appointments by duration, shortest first
- `relatcompromissos.txt`: every appointment in full, by id, separated by
  blank lines
- `resultado.txt`: the final result

If the agenda file cannot be opened, the command prints an error and exits
with status 1. A missing positions file is not an error; its values are then
all 0.

## Agenda format

Each appointment starts with a line made of a type letter and a numeric id.
The second line holds the date and time (`dd/mm/yyyy hh:mm`), the third the
duration in minutes. The remaining lines depend on the type. One line after
each appointment is skipped as the separator, so appointments are separated
by a single blank line.

| Letter | Type       | Fields after date/time and duration                       |
|--------|------------|-----------------------------------------------------------|
| `A`    | Aula       | discipline, level, priority grade                         |
| `O`    | Orientação | postponable, student, level, defence date/time, grade     |
| `R`    | Reunião    | postponable, subject, priority grade                      |
| `E`    | Evento     | name, place, priority grade (duration given in days)      |
| `P`    | Particular | postponable, reason, place, priority grade                |

Levels are `Graduação`, `Especialização` or `Mestrado`; anything else is read
as `Graduação`. The postponable flag is true only for exactly `true` or `1`.
Text fields are cut to 50 characters. Entries with an unknown type letter are
skipped.

An example:

```
A000001
10/03/2024 08:00
120
Cálculo
Graduação
3
```

The positions file holds up to four integers, one per line.

## Priorities

An appointment's priority is its grade multiplied by a factor that depends on
its type: meeting 4, event 3, class 2, private 2, supervision 1. Classes and
events can never be postponed. For a meeting, supervision or private
appointment that cannot be postponed, the factor goes up by one.

## Library use

```python
from agendafiltro.gerenciador import GerenciadorRelatorios

gerenciador = GerenciadorRelatorios()
gerenciador.carregar_dados("exemplos/agenda.txt", "exemplos/posicoes.txt")
gerenciador.gerar_relatorios(".")
resultado = gerenciador.calcular_resultado(".")
```

`carregar_dados` raises `OSError` when the agenda cannot be read.

Other useful pieces:

- `agendafiltro.leitor`: `ler_agenda`, `ler_posicoes`, `parse_compromisso`
- `agendafiltro.compromisso`: `Aula`, `Orientacao`, `Reuniao`, `Evento`,
  `Particular`, with `calcular_prioridade`, `obter_descricao`, `obter_fim`
  and `formatar_completo`
- `agendafiltro.prioridade`: `comparar_prioridades_com_desempate` orders by
  priority, then start, then type, then description
- `agendafiltro.conflito`: `compromissos_conflitam` and
  `detectar_todos_conflitos` find overlapping appointments on the same day
- `agendafiltro.classificador`: `encontrar_conflitante_principal` returns the
  highest-priority appointment that overlaps a given one
- `agendafiltro.relatorios` and `agendafiltro.escritor`: ordering, formatting
  and writing of each report
- `agendafiltro.datas`: `Data`, `Hora`, `DateTime` and their helpers

## Limitations

- `classificar_compromissos` marks every appointment as confirmed. Nothing is
  postponed or cancelled, so `relatadiados.txt` and `relatcancelados.txt` are
  always written empty, even though conflicts can be detected.
- The final result written to `resultado.txt` is always `0`.
- The report positions are read but not used.
- End times move forward at most one day and do not roll over month or year.
- In the complete report, a supervision's extra line is the fixed text
  `Assunto: Data da Defesa`, not its defence date.