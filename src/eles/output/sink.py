"""Output sinks: plain stdout or stdout duplicated into a capture file."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from eles.exceptions import CaptureError


class TeeWriter:
    """Fans every write out to several text streams, in order."""

    def __init__(self, *streams: TextIO) -> None:
        self._streams = streams

    @property
    def streams(self) -> tuple[TextIO, ...]:
        return self._streams

    def write(self, text: str) -> int:
        for stream in self._streams:
            stream.write(text)
        return len(text)

    def flush(self) -> None:
        for stream in self._streams:
            stream.flush()


@contextmanager
def open_output(
    capture: bool,
    capture_file: Path,
    stream: TextIO | None = None,
) -> Iterator[TextIO]:
    """Yield the stream listings are written to.

    With ``capture`` set the capture file is truncated and every write is
    duplicated into it; the file is closed when the block exits. Names that
    are not valid UTF-8 are written back as their original bytes.

    Raises:
        CaptureError: If the capture file cannot be created.
    """
    out = stream or sys.stdout
    if not capture:
        yield out
        return

    try:
        captured = open(
            capture_file, "w", encoding="utf-8", errors="surrogateescape"
        )
    except OSError as e:
        raise CaptureError(f"Cannot create capture file {capture_file}: {e}") from e

    with captured:
        tee = TeeWriter(out, captured)
        try:
            yield tee  # type: ignore[misc]
        finally:
            tee.flush()
