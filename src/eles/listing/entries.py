"""Directory entries and the metadata accessor.

Real directory entries (from ``os.scandir``) and synthetic ones (``.``,
``..`` and standalone file arguments) share the ``DirectoryEntry``
interface, so filtering, sorting, coloring and rendering never need to
know which kind they were handed.
"""

import grp
import os
import pwd
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class FileMetadata:
    """Snapshot of the stat fields a listing needs.

    Attributes:
        mode: Type, permission and special bits (``st_mode``).
        nlink: Hard link count.
        uid: Numeric owner id.
        gid: Numeric group id.
        size: Size in bytes.
        mtime_ns: Modification time in nanoseconds since the epoch.
        rdev: Raw device number (device files only, else 0).
        blocks: Allocated 512-byte blocks.
    """

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime_ns: int
    rdev: int = 0
    blocks: int = 0

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "FileMetadata":
        """Build metadata from an ``os.stat_result``."""
        return cls(
            mode=st.st_mode,
            nlink=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            size=st.st_size,
            mtime_ns=st.st_mtime_ns,
            rdev=getattr(st, "st_rdev", 0),
            blocks=getattr(st, "st_blocks", 0),
        )

    @property
    def mtime(self) -> float:
        """Modification time in seconds since the epoch."""
        return self.mtime_ns / 1_000_000_000

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.mode)

    @property
    def is_regular(self) -> bool:
        return stat.S_ISREG(self.mode)

    @property
    def is_device(self) -> bool:
        return stat.S_ISCHR(self.mode) or stat.S_ISBLK(self.mode)

    @property
    def is_fifo(self) -> bool:
        return stat.S_ISFIFO(self.mode)

    @property
    def is_socket(self) -> bool:
        return stat.S_ISSOCK(self.mode)

    @property
    def is_executable(self) -> bool:
        """Whether any of the owner, group or other execute bits is set."""
        return bool(self.mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


class DirectoryEntry(ABC):
    """A named item in a listing.

    Attributes:
        name: Display name.
        path: Filesystem path used for follow-up lookups (link targets).
    """

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path

    @abstractmethod
    def metadata(self) -> FileMetadata:
        """Fetch the entry's metadata without following symlinks.

        Raises:
            OSError: If the entry can no longer be stat'ed.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, path={self.path!r})"


class ScannedEntry(DirectoryEntry):
    """An entry read from a directory with ``os.scandir``."""

    def __init__(self, dir_entry: os.DirEntry) -> None:
        super().__init__(dir_entry.name, dir_entry.path)
        self._dir_entry = dir_entry

    def metadata(self) -> FileMetadata:
        return FileMetadata.from_stat(self._dir_entry.stat(follow_symlinks=False))


class SyntheticEntry(DirectoryEntry):
    """An entry carrying metadata captured elsewhere under any display name."""

    def __init__(self, meta: FileMetadata, name: str, path: str | None = None) -> None:
        super().__init__(name, path if path is not None else name)
        self._meta = meta

    def metadata(self) -> FileMetadata:
        return self._meta


def make_synthetic_entry(
    meta: FileMetadata, display_name: str, path: str | None = None
) -> DirectoryEntry:
    """Wrap ``meta`` as an entry named ``display_name``.

    Used for standalone file arguments and the ``.``/``..`` pseudo-entries.
    """
    return SyntheticEntry(meta, display_name, path)


def read_directory(path: str) -> list[DirectoryEntry]:
    """List the raw entries of ``path`` in directory order.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    with os.scandir(path) as it:
        return [ScannedEntry(dir_entry) for dir_entry in it]


def _triad(
    mode: int, read: int, write: int, execute: int, special: int, mark: str
) -> str:
    """Render one rwx group, folding a special bit into the execute slot."""
    chars = "r" if mode & read else "-"
    chars += "w" if mode & write else "-"
    if mode & special:
        chars += mark if mode & execute else mark.upper()
    else:
        chars += "x" if mode & execute else "-"
    return chars


def permission_string(meta: FileMetadata) -> str:
    """Render the 10-character permission string, e.g. ``drwxr-sr-x``."""
    mode = meta.mode
    if meta.is_dir:
        kind = "d"
    elif meta.is_symlink:
        kind = "l"
    elif stat.S_ISCHR(mode):
        kind = "c"
    elif stat.S_ISBLK(mode):
        kind = "b"
    else:
        kind = "-"

    return (
        kind
        + _triad(mode, stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s")
        + _triad(mode, stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s")
        + _triad(mode, stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t")
    )


def owner_name(meta: FileMetadata) -> str:
    """Resolve the owner name, falling back to the numeric uid."""
    try:
        return pwd.getpwuid(meta.uid).pw_name
    except (KeyError, OSError):
        return str(meta.uid)


def group_name(meta: FileMetadata) -> str:
    """Resolve the group name, falling back to the numeric gid."""
    try:
        return grp.getgrgid(meta.gid).gr_name
    except (KeyError, OSError):
        return str(meta.gid)
