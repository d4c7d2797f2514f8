"""
calclib CLI - Command Line Interface.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calclib import __version__
from calclib.config import get_settings
from calclib.core.calculator import Calculator
from calclib.core.operations import Operation
from calclib.errors import CalculatorError
from calclib.logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)

# Lets negative operands such as -5 through as arguments
OPERAND_CONTEXT = {"ignore_unknown_options": True}


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log every operation at DEBUG level")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """calclib - basic integer arithmetic."""
    settings = get_settings()
    level = "DEBUG" if verbose else settings.log_level
    setup_logging(level, settings.log_file)

    if verbose:
        settings = settings.model_copy(update={"trace_operations": True})
    ctx.obj = Calculator(settings=settings)


def _run(ctx: click.Context, operation: str, a: int, b: int) -> None:
    calculator: Calculator = ctx.obj
    try:
        result = calculator.apply(operation, a, b)
    except CalculatorError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)
    click.echo(result)


@main.command(context_settings=OPERAND_CONTEXT)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def total(ctx: click.Context, a: int, b: int):
    """Print A + B."""
    _run(ctx, Operation.TOTAL, a, b)


@main.command(context_settings=OPERAND_CONTEXT)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def subtract(ctx: click.Context, a: int, b: int):
    """Print A - B."""
    _run(ctx, Operation.SUBTRACT, a, b)


@main.command(context_settings=OPERAND_CONTEXT)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def multiply(ctx: click.Context, a: int, b: int):
    """Print A * B."""
    _run(ctx, Operation.MULTIPLY, a, b)


@main.command(context_settings=OPERAND_CONTEXT)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def divide(ctx: click.Context, a: int, b: int):
    """Print A / B, truncated toward zero."""
    _run(ctx, Operation.DIVIDE, a, b)


@main.command(context_settings=OPERAND_CONTEXT)
@click.argument("operation")
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def apply(ctx: click.Context, operation: str, a: int, b: int):
    """Run OPERATION (name, alias or symbol) on A and B."""
    _run(ctx, operation, a, b)


@main.command()
def operations():
    """List available operations."""
    table = Table(title="Operations")
    table.add_column("Name", style="cyan")
    table.add_column("Symbol", style="green", justify="center")
    table.add_column("Description")

    for op in Operation:
        table.add_row(op.value, op.symbol, op.description)

    console.print(table)


if __name__ == "__main__":
    main()
