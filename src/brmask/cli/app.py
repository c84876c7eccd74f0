"""Main Typer application for brmask."""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from brmask import __version__
from brmask.cli.console import console, print_error, print_success, setup_logging
from brmask.core.masking import is_valid_email
from brmask.core.models import Amount, MaskedField, MaskKind
from brmask.core.rules.mask_rules import MAX_LENGTH, PATTERNS
from brmask.shared.formatters import format_currency

app = typer.Typer(
    name="brmask",
    help="Máscaras e validação de CPF, CNPJ, CEP, telefone e valores em reais",
    add_completion=True,
    no_args_is_help=True,
)

KindArgument = Annotated[MaskKind, typer.Argument(help="Tipo do campo")]
ValueArgument = Annotated[str, typer.Argument(help="Valor digitado")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"brmask v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Mostra logs de depuração"),
    ] = False,
) -> None:
    """brmask - máscaras e validadores de campos brasileiros."""
    setup_logging(verbose)


@app.command()
def mask(kind: KindArgument, valor: ValueArgument) -> None:
    """Aplica a máscara do tipo ao valor."""
    field = MaskedField(raw=valor, kind=kind)
    console.print(escape(field.masked), highlight=False)


@app.command()
def validate(kind: KindArgument, valor: ValueArgument) -> None:
    """Valida o valor (dígitos verificadores e tamanho)."""
    field = MaskedField(raw=valor, kind=kind)
    masked = escape(field.masked)
    if field.is_valid:
        print_success(f"{masked} é um {kind.value} válido")
        return

    size = len(field.canonical)
    limit = MAX_LENGTH[kind]
    if limit is not None and size < limit:
        print_error(f"{kind.value} incompleto: {size} de {limit} caracteres")
    else:
        print_error(f"{masked or escape(valor)} não é um {kind.value} válido")
    raise typer.Exit(1)


@app.command()
def email(valor: ValueArgument) -> None:
    """Valida um endereço de e-mail."""
    if not is_valid_email(valor):
        print_error(f"E-mail inválido: {escape(valor)}")
        raise typer.Exit(1)
    print_success(f"E-mail válido: {escape(valor)}")


@app.command(name="parse-amount")
def parse_amount_command(
    texto: Annotated[str, typer.Argument(help="Valor em reais, ex.: 'R$ 1.234,56'")],
) -> None:
    """Converte um valor digitado em reais para número."""
    amount = Amount.parse(texto)
    console.print(
        f"[value]{amount.value}[/value] ([currency]{format_currency(amount.value)}[/currency])",
        highlight=False,
    )


@app.command(name="format-amount")
def format_amount_command(
    valor: Annotated[str, typer.Argument(help="Valor numérico, ex.: 1234.56")],
) -> None:
    """Formata um valor numérico como máscara de reais."""
    try:
        number = Decimal(valor)
    except InvalidOperation:
        print_error(f"Valor numérico inválido: {escape(valor)}")
        raise typer.Exit(1)

    try:
        amount = Amount(value=number)
    except ValidationError as e:
        print_error(escape(e.errors()[0]["msg"]))
        raise typer.Exit(1)

    if amount.masked:
        console.print(amount.masked, highlight=False)
    else:
        console.print("[muted](vazio)[/muted]")


@app.command()
def kinds() -> None:
    """Lista os tipos de campo suportados."""
    table = Table(title="Tipos de campo", show_header=True, header_style="bold")
    table.add_column("Tipo", style="cyan", no_wrap=True)
    table.add_column("Tamanho máx.", justify="right")
    table.add_column("Máscara")

    for kind in MaskKind:
        limit = MAX_LENGTH[kind]
        if kind is MaskKind.PHONE_AUTO:
            pattern = f"{PATTERNS[MaskKind.PHONE_FIXED]} ou {PATTERNS[MaskKind.PHONE_MOBILE]}"
        else:
            pattern = PATTERNS.get(kind, "1.234,56")
        table.add_row(kind.value, str(limit) if limit else "-", escape(pattern))

    console.print(table)


if __name__ == "__main__":
    app()
