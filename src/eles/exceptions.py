"""Exception hierarchy for eles."""

import errno


class ElesError(Exception):
    """Base exception for all eles errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Listing Errors (path-local, reported and skipped)
class ListingError(ElesError):
    """A single path could not be listed."""

    user_message = "Cannot access path"
    verb: str = "cannot access"

    def __init__(
        self,
        path: str,
        reason: str | None = None,
        *,
        verb: str | None = None,
    ) -> None:
        self.path = path
        self.reason = reason or self.user_message
        if verb:
            self.verb = verb
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{self.verb} '{self.path}': {self.reason}"

    @property
    def diagnostic(self) -> str:
        """One-line message naming the failing path."""
        return f"eles: {self}"

    @classmethod
    def from_os_error(
        cls, path: str, exc: OSError, *, directory: bool = False
    ) -> "ListingError":
        """Classify an OSError raised while accessing ``path``.

        Args:
            path: The path as given by the user.
            exc: The error raised by the filesystem call.
            directory: Whether the failure happened while reading a directory.

        Returns:
            The matching ListingError subclass instance.
        """
        if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
            return PathNotFoundError(path)
        if isinstance(exc, PermissionError) or exc.errno in (
            errno.EACCES,
            errno.EPERM,
        ):
            verb = "cannot open directory" if directory else "cannot open"
            return PathPermissionError(path, verb=verb)
        if isinstance(exc, NotADirectoryError) or exc.errno == errno.ENOTDIR:
            return NotADirectoryPathError(path)
        return PathAccessError(path, exc.strerror or str(exc))


class PathNotFoundError(ListingError):
    """Path does not exist."""

    user_message = "No such file or directory"


class PathPermissionError(ListingError):
    """Path exists but may not be read."""

    user_message = "Permission denied"
    verb = "cannot open"


class NotADirectoryPathError(ListingError):
    """A path component used as a directory is not one."""

    user_message = "Not a directory"


class PathAccessError(ListingError):
    """Any other filesystem failure."""

    def _describe(self) -> str:
        return f"{self.path}: {self.reason}"


# Capture Errors
class CaptureError(ElesError):
    """The capture file could not be created."""

    exit_code = 1
    user_message = "Cannot create capture file"


# Config Errors
class ConfigError(ElesError):
    """Configuration errors."""

    exit_code = 2
    user_message = "Configuration error"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    exit_code = 2
    user_message = "Invalid configuration"
