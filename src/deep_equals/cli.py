from __future__ import annotations

import json
from pathlib import Path

import typer

app = typer.Typer(
    name="deep-equals", help="Deep-equality assertions with readable mismatch messages"
)


def _load_json(path_str: str, label: str):
    path = Path(path_str)
    if not path.exists():
        typer.echo(f"Error: {label} file not found: {path_str}", err=True)
        raise typer.Exit(2)
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        typer.echo(f"Error: {label} file is not valid JSON: {e}", err=True)
        raise typer.Exit(2)


@app.command()
def demo(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run the demonstration suite and print every failure message."""
    from deep_equals.fixtures import demo_cases
    from deep_equals.runner import render_failures, run_all
    from deep_equals.verbose import setup_logger

    setup_logger(verbose=verbose)
    result = run_all(demo_cases())

    typer.echo(render_failures(result.assertion_failures))
    summary = result.summary
    typer.echo(
        f"{summary.total} cases: {summary.passed} passed, "
        f"{summary.failed} failed, {summary.errors} errors"
    )


@app.command()
def compare(
    expected: str = typer.Argument(help="Path to the expected JSON document"),
    actual: str = typer.Argument(help="Path to the actual JSON document"),
    message: str = typer.Option("", "--message", "-m", help="Prefix for the failure message"),
    nan_equal: bool = typer.Option(
        True, "--nan-equal/--no-nan-equal", help="Treat NaN as equal to NaN"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Compare two JSON documents; exit 1 and print the first mismatch if they differ."""
    from deep_equals.comparator import compare as compare_values
    from deep_equals.options import CompareOptions
    from deep_equals.verbose import setup_logger

    setup_logger(verbose=verbose)
    expected_doc = _load_json(expected, "expected")
    actual_doc = _load_json(actual, "actual")

    result = compare_values(
        expected_doc,
        actual_doc,
        message=message,
        options=CompareOptions(nan_equals_nan=nan_equal),
    )

    if not result.passed:
        typer.echo(result.message, err=True)
        if result.failure.path:
            typer.echo(f"At: {result.failure.jsonpath}", err=True)
        raise typer.Exit(1)

    typer.echo("Values are equal")