"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica de despacho de comandos con el texto de ayuda y
  el formato de mensajes.
- Los textos son fijos; se imprimen como `Text` para que rich no interprete
  `[...]` ni `\\x` como markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import WriteReport


def build_usage(prog: str) -> str:
    return (
        "usage:\n"
        f"  {prog} --help\n"
        f"  {prog} r[ead] [<offset> <length>] <file>\n"
        f"  {prog} w[rite] <offset> <data> <file>\n"
        f"  {prog} m[emset] <offset> <length> <char> <file>"
    )


EXTENDED_HELP = """
  read, write, memset: <offset> and <length> may be hexadecimal prefixed with
    `0x' or `\\x', an octal number prefixed with `0' or decimal

  read: <length> set to 0 or `all' will print all bytes

  write, memset: <offset> set to `append' will write data directly after the
    end of the file

  write: <data> must be hexadecimal without prefixes (whitespaces are ignored)

  memset: <char> can be a literal character, escaped control character,
    hexadecimal value prefixed with `0x' or `\\x' or a decimal number
    prefixed with `\\'
"""


def print_usage(console: Console, prog: str) -> None:
    console.print(Text(build_usage(prog)))


def print_help(console: Console, prog: str) -> None:
    """Imprime uso + ayuda extendida (salida de `--help`)."""

    console.print(Text(build_usage(prog)))
    console.print(Text(EXTENDED_HELP))


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("error:", "bold red"), " ", message))


def print_write_report(console: Console, report: WriteReport) -> None:
    console.print(Text(f"{report.bytes_written} bytes successfully written to `{report.path}'"))
