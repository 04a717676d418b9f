"""Pytest fixtures for eles tests."""

import logging
import os
import tempfile
from collections.abc import Callable, Generator
from io import StringIO
from pathlib import Path

import pytest

from eles.config import reset_config
from eles.config.defaults import (
    ENV_CAPTURE_FILE,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_NO_COLOR,
)
from eles.listing.context import ListingContext
from eles.listing.entries import FileMetadata
from eles.listing.options import ListingOptions


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tree(temp_dir: Path) -> Path:
    """Create a small directory tree.

    Layout:
        a.txt          plain file
        run.sh         executable
        .hidden        dotfile
        sub/nested.txt
    """
    (temp_dir / "a.txt").write_text("alpha\n")
    script = temp_dir / "run.sh"
    script.write_text("#!/bin/sh\necho hi\n")
    script.chmod(0o755)
    (temp_dir / ".hidden").write_text("secret\n")

    subdir = temp_dir / "sub"
    subdir.mkdir()
    (subdir / "nested.txt").write_text("nested\n")

    return temp_dir


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, temp_dir: Path
) -> Generator[None, None, None]:
    """Keep user config and color settings out of every test."""
    monkeypatch.setenv(ENV_CONFIG_PATH, str(temp_dir / "no-such-config.toml"))
    for name in (ENV_LOG_LEVEL, ENV_CAPTURE_FILE, ENV_NO_COLOR):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_meta() -> Callable[..., FileMetadata]:
    """Factory for FileMetadata with sensible defaults."""

    def factory(mode: int, **overrides: int) -> FileMetadata:
        fields = {
            "mode": mode,
            "nlink": 1,
            "uid": os.getuid(),
            "gid": os.getgid(),
            "size": 0,
            "mtime_ns": 1_700_000_000 * 1_000_000_000,
            "rdev": 0,
            "blocks": 0,
        }
        fields.update(overrides)
        return FileMetadata(**fields)

    return factory


@pytest.fixture
def make_context() -> Callable[..., tuple[ListingContext, StringIO, StringIO]]:
    """Factory for a ListingContext writing into StringIO buffers."""

    def factory(
        *paths: str, bypass_color: bool = True, **option_flags: bool
    ) -> tuple[ListingContext, StringIO, StringIO]:
        out, err = StringIO(), StringIO()
        ctx = ListingContext(
            options=ListingOptions(paths=tuple(paths), **option_flags),
            stream=out,
            error_stream=err,
            logger=logging.getLogger("eles.tests"),
            bypass_color=bypass_color,
        )
        return ctx, out, err

    return factory
