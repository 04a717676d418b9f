"""Traversal driver: classify input paths, list them, recurse on request."""

import os

from eles.exceptions import ListingError
from eles.listing.context import ListingContext
from eles.listing.entries import (
    DirectoryEntry,
    FileMetadata,
    make_synthetic_entry,
    read_directory,
)
from eles.listing.filter import filter_entries
from eles.listing.options import CURRENT_DIRECTORY
from eles.listing.sort import sort_entries
from eles.output import get_renderer

PSEUDO_NAMES = frozenset({".", ".."})


def join_display_path(parent: str, child: str) -> str:
    """Join a child name onto a displayed parent path, keeping ``./``."""
    if parent == CURRENT_DIRECTORY:
        return f"./{child}"
    return os.path.join(parent, child)


def _is_real_directory(entry: DirectoryEntry) -> bool:
    try:
        return entry.metadata().is_dir
    except OSError:
        return False


class Lister:
    """Lists every input path of a ListingContext.

    Path errors are reported on the error stream and never stop the run.

    Example:
        ctx = ListingContext(options=ListingOptions(paths=("src",)))
        Lister(ctx).run()
    """

    def __init__(self, ctx: ListingContext) -> None:
        self.ctx = ctx
        self.options = ctx.options
        self.logger = ctx.logger
        self.renderer = get_renderer(
            self.options.long_format,
            bypass_color=ctx.bypass_color,
            now=ctx.now,
        )

    def run(self) -> int:
        """List all paths; returns the process exit status."""
        self.logger.debug(
            "listing %s with flags %r",
            list(self.options.paths),
            self.options.to_flags(),
        )

        files: list[tuple[str, FileMetadata]] = []
        directories: list[str] = []
        for path in self.options.paths:
            try:
                meta = FileMetadata.from_stat(os.lstat(path))
            except OSError as e:
                self.report(ListingError.from_os_error(path, e))
                continue
            if meta.is_dir:
                directories.append(path)
            else:
                files.append((path, meta))

        for path, meta in files:
            self.list_file(path, meta)

        if self.options.recursive:
            for path in directories:
                self.list_tree(path)
            return 0

        if files and directories:
            self._write("\n")

        with_headers = len(directories) > 1 or bool(files)
        for index, path in enumerate(directories):
            if with_headers:
                self._write(f"{path}:\n")
            self.list_directory(path)
            if index < len(directories) - 1:
                self._write("\n")

        return 0

    def list_file(self, path: str, meta: FileMetadata) -> None:
        """Render a non-directory argument as a single entry."""
        if self.options.long_format:
            entry = make_synthetic_entry(meta, path)
            self.renderer.write([entry], self.ctx.stream, show_total=False)
        else:
            self._write(f"{path}\n")

    def list_directory(self, path: str) -> list[DirectoryEntry] | None:
        """List one directory's filtered and sorted contents.

        Returns:
            The entries as displayed, or None if the directory could not be read.
        """
        try:
            raw = read_directory(path)
        except OSError as e:
            self.report(ListingError.from_os_error(path, e, directory=True))
            return None

        entries = filter_entries(raw, self.options.show_hidden, path, self.logger)
        entries = sort_entries(entries, self.options.time_sort, self.options.reverse)
        self.renderer.write(entries, self.ctx.stream)
        return entries

    def list_tree(self, root: str) -> None:
        """List ``root`` and its subdirectories depth-first, in display order.

        Symlinks are never descended into, so links back to an ancestor
        cannot cause a loop.
        """
        pending = [root]
        while pending:
            path = pending.pop()
            self._write(f"\n{path}:\n")
            entries = self.list_directory(path)
            if entries is None:
                continue

            children = []
            for entry in entries:
                if entry.name in PSEUDO_NAMES:
                    continue
                if _is_real_directory(entry):
                    children.append(join_display_path(path, entry.name))
                elif os.path.islink(entry.path):
                    self.logger.debug(
                        "not following symlink %s",
                        entry.path,
                        extra={"path": entry.path},
                    )

            pending.extend(reversed(children))

    def report(self, error: ListingError) -> None:
        """Write a path diagnostic to the error stream."""
        self.logger.debug("path error: %r", error, extra={"path": error.path})
        self.ctx.error_stream.write(f"{error.diagnostic}\n")

    def _write(self, text: str) -> None:
        self.ctx.stream.write(text)
