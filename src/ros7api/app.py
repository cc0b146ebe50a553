"""Typer application and CLI entry point for ros7api.

Two commands are provided:

* ``generate`` -- load a schema and write the typed record package.
* ``schema`` -- print the record-bearing nodes of a schema as a table.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and invokes the Typer app.
Unhandled exceptions are written to a crash log under the data directory.

See Also:
    :mod:`ros7api.generator`: The code generator behind ``generate``.
    :mod:`ros7api.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any

import typer

from ros7api import __version__
from ros7api.exceptions import Ros7apiError
from ros7api.exit_codes import EXIT_GENERIC_FAILURE
from ros7api.output import error, get_output, success


app = typer.Typer(
    name="ros7api",
    help="Generate typed Python clients for the RouterOS 7 REST API.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"ros7api {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~ros7api.output.OutputManager` from the
    CLI flags.
    """
    from ros7api.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose)
    )


def _load_tree(schema: str):  # noqa: ANN202
    """Load and build the schema tree, exiting with the error's code on failure."""
    from ros7api.schema import build_tree, load_schema

    try:
        return build_tree(load_schema(schema))
    except Ros7apiError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


@app.command("generate")
def generate_command(
    schema: str = typer.Option(
        "",
        "--schema",
        "-s",
        help="Schema file (JSON or YAML), or '-' for stdin. Defaults to the bundled schema.",
    ),
    output: Path = typer.Option(
        Path("generated"),
        "--output",
        "-o",
        help="Directory to write the generated package into.",
    ),
) -> None:
    """Generate one typed module per record, plus the package ``__init__``.

    Example::

        ros7api generate --schema routeros.yaml --output src/myproject/api
    """
    from ros7api.generator import generate_package
    from ros7api.schema import BUNDLED_SCHEMA

    root = _load_tree(schema or str(BUNDLED_SCHEMA))
    try:
        written = generate_package(root, output)
    except Ros7apiError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except OSError as exc:
        error(f"Cannot write to {output}: {exc}")
        raise typer.Exit(code=EXIT_GENERIC_FAILURE) from None

    success(f"Generated {len(written) - 1} record module(s) in {output}")


@app.command("schema")
def schema_command(
    schema: str = typer.Option(
        "",
        "--schema",
        "-s",
        help="Schema file (JSON or YAML), or '-' for stdin. Defaults to the bundled schema.",
    ),
) -> None:
    """List the records described by a schema.

    Shows each record-bearing path with its generated type name, its
    property count, and how many of those properties are read-only.
    """
    from ros7api.generator.naming import type_name
    from ros7api.schema import BUNDLED_SCHEMA, record_nodes

    root = _load_tree(schema or str(BUNDLED_SCHEMA))
    rows: list[list[str]] = []
    for node in record_nodes(root):
        assert node.record is not None
        properties = node.record.properties
        rows.append([
            node.path,
            type_name(node.path),
            str(len(properties)),
            str(sum(1 for p in properties if p.read_only)),
        ])

    get_output().print_table(
        ["Path", "Type", "Properties", "Read-only"],
        rows,
        title=f"Records ({len(rows)})",
    )


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from ros7api.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``ros7api`` console script.

    Unhandled :class:`~ros7api.exceptions.Ros7apiError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        if isinstance(exc, Ros7apiError):
            error(str(exc))
            sys.exit(exc.exit_code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
