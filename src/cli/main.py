"""CLI (Typer): despacho por forma de argumentos.

Formas aceptadas:
- `hexedit read <file>`
- `hexedit read <offset> <length> <file>`
- `hexedit write <offset> <data> <file>`
- `hexedit memset <offset> <length> <char> <file>`

Por qué un único comando con argumentos variádicos:
- El comando se decide por nombre *y* número de argumentos, admite
  abreviaturas (`r`, `w`, `m`) en cualquier capitalización y `--help` puede
  aparecer en cualquier posición; eso no encaja con subcomandos de Typer.
- Offsets negativos (`-1`) llegan como argumentos, no como opciones.
"""

from __future__ import annotations

import sys

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import print_error, print_help, print_usage, print_write_report
from core.config import AppSettings
from core.errors import HexEditError
from core.logging_setup import configure_logging
from core.services.file_ops import (
    FillRequest,
    ReadRequest,
    WriteRequest,
    fill_range,
    read_range,
    write_payload,
)

app = typer.Typer(add_completion=False, help="Byte-level file inspection and editing.")

_console = Console(soft_wrap=True, highlight=False, markup=False, emoji=False)
_err_console = Console(stderr=True, soft_wrap=True, highlight=False, markup=False, emoji=False)


def is_command(arg: str, name: str) -> bool:
    """`r`, `READ` and `read` all select `read`."""

    return (len(arg) == 1 and arg.lower() == name[0]) or arg.lower() == name


def dispatch(argv: list[str], settings: AppSettings) -> bool:
    """Run the operation matching `argv`'s shape.

    Returns False when no shape matched so the caller can print usage.
    """

    if len(argv) == 2 and is_command(argv[0], "read"):
        _dump(ReadRequest(path=argv[1]), settings)
    elif len(argv) == 4 and is_command(argv[0], "read"):
        _dump(ReadRequest(path=argv[3], offset=argv[1], length=argv[2]), settings)
    elif len(argv) == 4 and is_command(argv[0], "write"):
        report = write_payload(
            WriteRequest(path=argv[3], offset=argv[1], data=argv[2]),
            settings=settings,
        )
        print_write_report(_console, report)
    elif len(argv) == 5 and is_command(argv[0], "memset"):
        report = fill_range(
            FillRequest(path=argv[4], offset=argv[1], length=argv[2], char=argv[3]),
            settings=settings,
        )
        print_write_report(_console, report)
    else:
        return False
    return True


def _dump(request: ReadRequest, settings: AppSettings) -> None:
    for line in read_range(request, settings=settings):
        typer.echo(line.render(), nl=False)


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
def hexedit(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(None, metavar="COMMAND [ARGS]..."),
) -> None:
    """Read, write or memset bytes of a file at an offset."""

    argv = list(args or [])
    prog = ctx.find_root().info_name or "hexedit"

    if "--help" in argv:
        print_help(_console, prog)
        raise typer.Exit(0)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"invalid configuration: {exc}")
        raise typer.Exit(1)
    configure_logging(settings, console=_err_console)

    try:
        handled = dispatch(argv, settings)
    except HexEditError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(1)

    if not handled:
        print_usage(_err_console, prog)
        raise typer.Exit(1)


def run(argv: list[str] | None = None) -> None:
    """Console entry point.

    The leading `--` is consumed by click, so every user argument (a literal
    `--` included) reaches the shape dispatch unchanged.
    """

    argv = sys.argv[1:] if argv is None else argv
    app(args=["--", *argv])
