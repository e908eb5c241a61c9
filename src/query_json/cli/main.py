#!/usr/bin/env python3
"""
query_json CLI: Main entry point

This module provides the command-line interface for query_json: read a JSON
file, evaluate a JSONPath query against it, and print the match(es) as
JSON or raw text.
"""

import logging
import sys
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from query_json.cli.common.config import PROGRAM_NAME, config
from query_json.cli.utils.render import render_result
from query_json.core.query import run_query, validate_query
from query_json.errors import LogFileError, OutputFormatError, QueryJSONError, UsageError
from query_json.utils.json_utils import load_document

# Initialize the main Typer app
app = typer.Typer(
    help="Evaluate a JSONPath query against a JSON file",
    add_completion=False,
)

USAGE_EXAMPLES = [
    "--query '$.users[0].name' ./examples/data.json",
    "--query '$.products[?(@.price > 100)]' ./examples/data.json",
    "--query '$.users[?(@.age > 20 && @.age < 28)].name' --raw ./examples/data.json",
    "--query '$.users[*].email' --raw ./examples/data.json",
]

# Options that accept the --name=true|false spelling
BOOL_FLAGS = {
    "pretty": ("--pretty", "--no-pretty"),
    "raw": ("--raw", "--no-raw"),
    "version": ("--version", None),
}
TRUE_VALUES = {"1", "t", "T", "true", "TRUE", "True"}
FALSE_VALUES = {"0", "f", "F", "false", "FALSE", "False"}
LONG_OPTIONS = {"query", "pretty", "raw", "version"}
LOGGER_NAME = "query-json"


def normalize_bool_flags(argv: List[str]) -> List[str]:
    """
    Rewrite Go-style flag spellings into the forms typer understands.

    --pretty=false becomes --no-pretty, --raw=true becomes --raw, and the
    single-dash long forms (-query, -raw, ...) get a second dash. Anything
    after "--" is left alone, as are values that aren't booleans.
    """
    result = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            result.append(arg)
            result.extend(args)
            break

        if arg.startswith("-") and not arg.startswith("--"):
            name = arg[1:].split("=", 1)[0]
            if name in LONG_OPTIONS:
                arg = "-" + arg

        if arg.startswith("--") and "=" in arg:
            name, value = arg[2:].split("=", 1)
            if name in BOOL_FLAGS:
                on_flag, off_flag = BOOL_FLAGS[name]
                if value in TRUE_VALUES:
                    result.append(on_flag)
                    continue
                if value in FALSE_VALUES:
                    if off_flag:
                        result.append(off_flag)
                    continue

        result.append(arg)
    return result


def setup_logging(verbose: bool = False, log_file: Optional[str] = None, json_logs: bool = False,
                  no_color: bool = False) -> Tuple[Console, logging.Logger]:
    """
    Configure logging based on CLI options.

    Log output never goes to stdout. Without --verbose the console handler
    only passes warnings and up, so a normal run prints nothing but the
    result or the one error line.

    Args:
        verbose: Enable debug logging on stderr
        log_file: Optional path to log file (always debug level)
        json_logs: Write file log records as JSON
        no_color: Disable colored output

    Returns:
        tuple[Console, Logger]: The configured console and logger instances

    Raises:
        LogFileError: If log_file cannot be opened for writing
    """
    log_console = Console(stderr=True, color_system=None if no_color else "auto")

    log_level = logging.DEBUG if verbose else logging.WARNING

    # Console handler with Rich formatting
    console_handler = RichHandler(
        console=log_console,
        show_path=verbose,
        show_time=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setLevel(log_level)
    handlers = [console_handler]

    # File handler if specified
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            raise LogFileError(log_file, e) from e
        file_handler.setLevel(logging.DEBUG)

        if json_logs:
            from pythonjsonlogger.json import JsonFormatter
            formatter = JsonFormatter('%(asctime)s %(name)s %(levelname)s %(message)s')
        else:
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if log_file else log_level,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"Logging configured: level={log_level}, log_file={log_file}, json_logs={json_logs}")

    return log_console, logger


def report_error(error: QueryJSONError, logger: logging.Logger) -> None:
    """Print the one-line diagnostic for error on stderr and exit."""
    logger.debug(f"{type(error).__name__}: {error.message}", exc_info=error.__cause__ is not None)
    typer.echo(error.report_line(), err=True)
    raise typer.Exit(code=error.exit_code)


def print_usage(ctx: typer.Context) -> None:
    """Print usage text and examples on stderr."""
    typer.echo(ctx.get_usage(), err=True)
    typer.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
    typer.echo("\nExamples:", err=True)
    for example in USAGE_EXAMPLES:
        typer.echo(f"  {ctx.command_path} {example}", err=True)


def write_output(text: str) -> None:
    """Write rendered output to stdout."""
    try:
        typer.echo(text, nl=False)
    except OSError as e:
        raise OutputFormatError(e) from e


def version_callback(version: bool):
    """Handle version flag."""
    if version:
        typer.echo(config.build.banner())
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    json_file: Optional[str] = typer.Argument(None, metavar="<json-file>", help="Path to the JSON file to query"),
    query: str = typer.Option("", "--query", "-q", help="JSONPath query (e.g., $.root[0], $.users[*].name)"),
    pretty: bool = typer.Option(config.pretty, "--pretty/--no-pretty", help="Pretty print JSON output"),
    raw: bool = typer.Option(config.raw, "--raw/--no-raw", help="Output raw values (no JSON formatting for strings)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Path to log file"),
    json_logs: bool = typer.Option(False, "--log-json", help="Write the log file in JSON format"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    version: bool = typer.Option(False, "--version", help="Show version information", callback=version_callback,
                                 is_eager=True),
):
    """
    Query a JSON file with a JSONPath expression.

    A single match is printed on its own, several matches as a JSON array
    (or one per line with --raw), and no match as null.
    """
    try:
        setup_console, logger = setup_logging(verbose=verbose, log_file=log_file, json_logs=json_logs,
                                              no_color=no_color)
    except LogFileError as e:
        report_error(e, logging.getLogger(LOGGER_NAME))

    if json_file is None:
        print_usage(ctx)
        raise typer.Exit(code=1)

    try:
        if not query:
            raise UsageError("--query parameter is required")
        validate_query(query)

        document = load_document(json_file)
        result = run_query(query, document)

        output = render_result(result, pretty=pretty, raw=raw)
        write_output(output)
    except QueryJSONError as e:
        report_error(e, logger)


def run(argv: Optional[List[str]] = None):
    """Console script entry point."""
    if argv is None:
        argv = sys.argv[1:]
    app(args=normalize_bool_flags(argv), prog_name=PROGRAM_NAME)


if __name__ == "__main__":
    run()
