"""Command-line options for eles.

Each flag is a single letter so that Click lets them be combined,
e.g. ``eles -laR``.
"""

from typing import Annotated

import typer

PathsArgument = Annotated[
    list[str] | None,
    typer.Argument(
        metavar="[PATH]...",
        help="Files or directories to list. Defaults to the current directory.",
        show_default=False,
    ),
]

LongOption = Annotated[
    bool,
    typer.Option("-l", help="Use long listing format."),
]

RecursiveOption = Annotated[
    bool,
    typer.Option("-R", help="List subdirectories recursively."),
]

AllOption = Annotated[
    bool,
    typer.Option("-a", help="Include entries whose names begin with a dot (.)."),
]

TimeSortOption = Annotated[
    bool,
    typer.Option("-t", help="Sort by modification time, newest first."),
]

ReverseOption = Annotated[
    bool,
    typer.Option("-r", help="Reverse order while sorting."),
]

CaptureOption = Annotated[
    bool,
    typer.Option("-c", help="Also write output to the capture file (output.txt)."),
]
