"""File utility errors."""

from dfget.common import DfgetError


class FileUtilError(DfgetError):
    """Base error for file utility operations."""
    pass


class PathNotExistError(FileUtilError):
    """Target path is absent where it was required to exist."""
    pass


class NotADirectoryPathError(FileUtilError):
    """Path exists but is not a directory."""
    pass


class IsDirectoryError(FileUtilError):
    """Path is a directory where a file was required."""
    pass


class NotRegularFileError(FileUtilError):
    """Path is not a regular file (directory, device, FIFO, missing...)."""
    pass


class DestinationExistsError(FileUtilError):
    """Copy destination is already present."""
    pass


class DigestMismatchError(FileUtilError):
    """File content does not match the expected MD5 digest."""
    pass
