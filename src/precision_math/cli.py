"""
Command-line interface for Precision Math.

Usage:
    precision-math info          Show supported precision formats
    precision-math constants     Show the constant table of a format
    precision-math eval          Evaluate one operation in each mode
    precision-math check         Run the cross-mode consistency corpus
"""

import logging
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from precision_math import __version__
from precision_math.algorithms import (
    EvaluationMode,
    check_consistency,
    get_kernel,
)
from precision_math.algorithms.consistency import compare_modes
from precision_math.data import (
    PrecisionFormat,
    get_epsilon,
    get_spec,
    list_available_formats,
)
from precision_math.exceptions import PrecisionMathError

app = typer.Typer(
    name="precision-math",
    help="Dual-mode, epsilon-tolerant floating-point primitives",
    add_completion=False,
)
console = Console()

# Operations taking integer arguments; everything else takes floats.
_INTEGER_ARGUMENTS: dict[str, tuple[bool, ...]] = {
    "pow": (False, True),
    "factorial": (True,),
    "gcd": (True, True),
}
_ARITY: dict[str, int] = {
    "sqrt": 1,
    "pow": 2,
    "factorial": 1,
    "mod": 2,
    "sin": 1,
    "cos": 1,
    "tan": 1,
    "sign": 1,
    "abs": 1,
    "equals": 2,
    "greater_than": 2,
    "less_than": 2,
    "gcd": 2,
    "degrees_to_radians": 1,
    "radians_to_degrees": 1,
}
_DUAL_MODE = frozenset({"sqrt", "pow", "factorial", "mod", "sin", "cos", "tan"})


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"precision-math version {__version__}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Precision Math - numeric kernel utilities."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display information about supported precision formats."""
    table = Table(title="Supported Precision Formats")

    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Bits", justify="right")
    table.add_column("Mantissa", justify="right")
    table.add_column("Machine ε", justify="right")
    table.add_column("Comparison ε", justify="right")
    table.add_column("Digits", justify="right")

    for fmt in list_available_formats():
        spec = get_spec(fmt)
        table.add_row(
            fmt.value.upper(),
            str(spec.bits),
            str(spec.mantissa_bits),
            f"{spec.machine_epsilon:.2e}",
            f"{get_epsilon(fmt):.2e}",
            str(spec.significant_digits),
        )

    console.print(table)


@app.command()  # type: ignore[misc]
def constants(
    precision: Annotated[
        str,
        typer.Argument(help="Precision format (fp64 or fp32)"),
    ] = "fp64",
) -> None:
    """Show the named constants of a precision format."""
    kernel = _kernel_or_exit(precision)
    table = Table(title=f"{kernel.format.value.upper()} Constants")

    table.add_column("Name", style="bold")
    table.add_column("Value", justify="right")

    for name in (
        "pi",
        "half_pi",
        "quarter_pi",
        "two_pi",
        "degrees_per_radian",
        "radians_per_degree",
        "inf",
        "epsilon",
        "machine_epsilon",
    ):
        table.add_row(name, repr(float(getattr(kernel, name))))

    console.print(table)


@app.command(name="eval")  # type: ignore[misc]
def evaluate(
    operation: Annotated[str, typer.Argument(help="Operation name, e.g. sin")],
    arguments: Annotated[list[str], typer.Argument(help="Operation arguments")],
    precision: Annotated[
        str,
        typer.Option("--precision", "-p", help="Precision format to use"),
    ] = "fp64",
    mode: Annotated[
        str,
        typer.Option("--mode", "-m", help="runtime, constant or both"),
    ] = "both",
) -> None:
    """Evaluate a single operation."""
    kernel = _kernel_or_exit(precision)

    if operation not in _ARITY:
        console.print(f"[red]Unknown operation:[/] {operation}. Valid: {sorted(_ARITY)}")
        raise typer.Exit(code=2)
    if len(arguments) != _ARITY[operation]:
        console.print(
            f"[red]{operation} takes {_ARITY[operation]} argument(s), "
            f"got {len(arguments)}[/]"
        )
        raise typer.Exit(code=2)

    try:
        parsed = _parse_arguments(operation, arguments)
    except ValueError as exc:
        console.print(f"[red]Invalid argument:[/] {exc}")
        raise typer.Exit(code=2) from exc

    try:
        if operation in _DUAL_MODE and mode == "both":
            result = compare_modes(kernel, operation, parsed)
            console.print(f"runtime:    {result.runtime_value!r}")
            console.print(f"constant:   {result.constant_value!r}")
            console.print(f"difference: {result.difference!r}")
            return

        method = getattr(kernel, operation)
        if operation in _DUAL_MODE:
            value = method(*parsed, mode=EvaluationMode(mode))
        else:
            value = method(*parsed)
    except PrecisionMathError as exc:
        console.print(f"[red]{type(exc).__name__}:[/] {exc}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        console.print(f"[red]Invalid mode:[/] {exc}")
        raise typer.Exit(code=2) from exc

    console.print(repr(value.item() if hasattr(value, "item") else value))


@app.command()  # type: ignore[misc]
def check(
    precision: Annotated[
        list[str] | None,
        typer.Option("--precision", "-p", help="Formats to check (default: all)"),
    ] = None,
) -> None:
    """Compare runtime and constant evaluation over the default corpus."""
    if precision is None:
        precision = [fmt.value for fmt in PrecisionFormat]

    failures = 0
    for name in precision:
        kernel = _kernel_or_exit(name)
        results = check_consistency(kernel)

        table = Table(title=f"{kernel.format.value.upper()} Cross-Mode Consistency")
        table.add_column("Operation", style="cyan")
        table.add_column("Arguments")
        table.add_column("Runtime", justify="right")
        table.add_column("Constant", justify="right")
        table.add_column("|Δ|", justify="right")
        table.add_column("OK", justify="center")

        for r in results:
            table.add_row(
                r.operation,
                ", ".join(str(a) for a in r.arguments),
                f"{r.runtime_value:.9g}",
                f"{r.constant_value:.9g}",
                f"{r.difference:.2e}",
                "✓" if r.agrees else "[red]✗[/]",
            )
            failures += not r.agrees

        console.print(table)

    if failures:
        console.print(f"\n[red]{failures} case(s) disagree[/]")
        raise typer.Exit(code=1)
    console.print("\n[green]All cases agree[/]")


def _kernel_or_exit(precision: str) -> Any:
    try:
        return get_kernel(precision)
    except ValueError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=2) from exc


def _parse_arguments(operation: str, arguments: list[str]) -> tuple[Any, ...]:
    integer_flags = _INTEGER_ARGUMENTS.get(operation, (False,) * len(arguments))
    return tuple(
        int(raw) if is_int else float(raw)
        for raw, is_int in zip(arguments, integer_flags, strict=True)
    )


if __name__ == "__main__":
    app()
