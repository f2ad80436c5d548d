"""CLI entrypoint — typer app that prints the recovered constant term.

Success: exactly the decimal integer on stdout (no trailing newline), exit 0.
Failure: one diagnostic line on stderr, exit 1.
"""

import logging
import sys

import structlog
import typer

from src.recovery.observer import StructlogRecoveryObserver
from src.recovery.pipeline import SecretRecovery

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog to write to stderr so stdout carries only the result."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=False)
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.", err=True
        )
        raise typer.Exit(code=1)

    # Without --verbose nothing below CRITICAL is emitted, and the pipeline
    # never logs at CRITICAL.
    level = logging.DEBUG if verbose else logging.CRITICAL
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@app.command()
def solve(
    input_file: typer.FileText = typer.Argument(
        "-", help="Path to the JSON share document ('-' reads stdin)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Emit structured log events on stderr"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Recover the constant term f(0) from encoded sample points."""
    _configure_structlog(log_format=log_format, verbose=verbose)

    try:
        text = input_file.read()
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Failed to read input: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    recovery = SecretRecovery(observer=StructlogRecoveryObserver())
    outcome = recovery.evaluate(text)
    if not outcome.success:
        typer.echo(outcome.details, err=True)
        raise typer.Exit(code=1)

    typer.echo(str(outcome.constant_term), nl=False)


if __name__ == "__main__":
    app()
