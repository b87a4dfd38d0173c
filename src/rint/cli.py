import logging
from collections.abc import Callable
from typing import Annotated

import srsly
import typer
from pydantic import ValidationError

from rint.errors import ParseError
from rint.models import BoundedInt

app = typer.Typer(help="Parse, render and combine 32-bit wrapping integers.")

_OPERATORS: dict[str, Callable[[BoundedInt, BoundedInt], BoundedInt]] = {
    "+": lambda lhs, rhs: lhs + rhs,
    "-": lambda lhs, rhs: lhs - rhs,
    "*": lambda lhs, rhs: lhs * rhs,
    "/": lambda lhs, rhs: lhs / rhs,
}


def _parse_operand(text: str) -> BoundedInt:
    try:
        return BoundedInt.from_str(text)
    except ParseError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err


def _parse_raw_bits(value: str) -> BoundedInt:
    """Parse a decimal or 0x-prefixed pattern. Raises typer.BadParameter."""
    try:
        raw = int(value.strip(), 0)
    except ValueError as err:
        raise typer.BadParameter(
            f"Invalid bit pattern '{value}': expected decimal or 0x-hex"
        ) from err
    try:
        return BoundedInt.from_bits(raw)
    except ValidationError as err:
        raise typer.BadParameter(
            f"Invalid bit pattern '{value}': must be in [0, 0xFFFFFFFF]"
        ) from err


def _echo_value(value: BoundedInt, *, source: str, as_json: bool) -> None:
    if as_json:
        typer.echo(
            srsly.json_dumps(
                {
                    "input": source,
                    "bits": value.bits,
                    "hex": value.to_hex(),
                    "value": value.to_string(),
                }
            )
        )
        return
    typer.echo(f"{value.to_string()} ({value.to_hex()})")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log parser transitions"),
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def parse(
    text: Annotated[str, typer.Argument(help="Decimal string to parse")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit a JSON object")
    ] = False,
) -> None:
    """Parse a decimal string into a 32-bit pattern."""
    value = _parse_operand(text)
    _echo_value(value, source=text, as_json=as_json)


@app.command()
def render(
    bits: Annotated[
        str, typer.Argument(help="Raw pattern, decimal or 0x-prefixed")
    ],
) -> None:
    """Render a raw 32-bit pattern as a signed decimal string."""
    typer.echo(_parse_raw_bits(bits).to_string())


@app.command()
def calc(
    lhs: Annotated[str, typer.Argument(help="Left operand")],
    op: Annotated[str, typer.Argument(help="One of + - * /")],
    rhs: Annotated[str, typer.Argument(help="Right operand")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit a JSON object")
    ] = False,
) -> None:
    """Apply one wrapping operation to two decimal operands."""
    operator = _OPERATORS.get(op)
    if operator is None:
        raise typer.BadParameter(
            f"Unknown operator '{op}': expected one of + - * /"
        )
    left = _parse_operand(lhs)
    right = _parse_operand(rhs)
    try:
        result = operator(left, right)
    except ZeroDivisionError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err
    _echo_value(result, source=f"{lhs} {op} {rhs}", as_json=as_json)
