"""Main CLI application for eles."""

import importlib
import io
import sys
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.markup import escape

from eles import __version__
from eles.cli.context import create_context, create_logger
from eles.cli.options import (
    AllOption,
    CaptureOption,
    LongOption,
    PathsArgument,
    RecursiveOption,
    ReverseOption,
    TimeSortOption,
)
from eles.config import get_config
from eles.exceptions import ElesError
from eles.listing.options import ListingOptions
from eles.listing.traversal import Lister
from eles.output import open_output

PROG_NAME = "eles"

# Create Typer app
app = typer.Typer(
    name=PROG_NAME,
    help="List directory contents.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Rich consoles for version and fatal error output
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"{PROG_NAME} version {__version__}")
        raise typer.Exit()


@app.command()
def ls(
    paths: PathsArgument = None,
    long_format: LongOption = False,
    recursive: RecursiveOption = False,
    show_all: AllOption = False,
    time_sort: TimeSortOption = False,
    reverse: ReverseOption = False,
    capture: CaptureOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> int:
    """List information about the given files and directories.

    Entries are sorted alphabetically unless -t is given.
    """
    try:
        config = get_config()
        logger = create_logger(config, use_color=sys.stderr.isatty())

        options = ListingOptions(
            long_format=long_format,
            recursive=recursive,
            show_hidden=show_all,
            time_sort=time_sort,
            reverse=reverse,
            capture=capture,
            paths=tuple(paths or ()),
        )

        with open_output(options.capture, config.output.capture_file) as out:
            ctx = create_context(
                options,
                stream=out,
                error_stream=sys.stderr,
                logger=logger,
                config=config,
            )
            return Lister(ctx).run()

    except ElesError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(e.exit_code) from None


def usage_error_type(command: object) -> type[Exception]:
    """Return the UsageError class of the click package behind ``command``.

    Newer Typer releases build commands on a bundled copy of click whose
    exceptions are unrelated to the standalone ``click`` package.
    """
    for cls in type(command).__mro__:
        module = cls.__module__
        if module.endswith(".core") and not module.startswith("typer.core"):
            package = module.rsplit(".", 1)[0]
            exceptions = importlib.import_module(f"{package}.exceptions")
            error_type: type[Exception] = exceptions.UsageError
            return error_type
    # typer.Exit is re-exported from the same click package
    bundled = sys.modules.get(typer.Exit.__module__)
    return getattr(bundled, "UsageError", click.UsageError)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit status.

    Unknown flags exit with status 1 after showing the usage line.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``).
    """
    command = typer.main.get_command(app)
    try:
        result = command.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except usage_error_type(command) as e:
        e.show()  # type: ignore[attr-defined]
        return 1
    return result if isinstance(result, int) else 0


def main() -> None:
    """Entry point for the CLI."""
    # File names that are not valid UTF-8 are printed as their raw bytes
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")
    sys.exit(run())


if __name__ == "__main__":
    main()
