"""Filesystem helpers used to stage, verify and clean up downloaded files.

None of these operations lock anything. Sequences such as "check the
destination, then write it" can race with other processes touching the same
path; callers that need atomicity must arrange it themselves.
"""

import logging
import os
import stat
from typing import BinaryIO

from dfget.common import StrPath, compute_md5, parent_dir
from .errors import (
    DestinationExistsError,
    DigestMismatchError,
    FileUtilError,
    IsDirectoryError,
    NotADirectoryPathError,
    NotRegularFileError,
    PathNotExistError,
)

logger = logging.getLogger(__name__)

# Read/write chunk size for copying and hashing
BUFFER_SIZE = 8 * 1024 * 1024  # 8 MB

DIRECTORY_MODE = 0o755
DEFAULT_FILE_MODE = 0o666
COPY_FILE_MODE = 0o755

COPY_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC

# Windows needs O_BINARY to avoid newline translation; absent on POSIX
_BINARY_FLAG = getattr(os, "O_BINARY", 0)


def create_directory(path: StrPath) -> None:
    """
    Create a directory and any missing ancestors.

    Args:
        path: Directory to create

    Raises:
        NotADirectoryPathError: If path exists but is not a directory
        OSError: If the path cannot be inspected or created
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        logger.debug(f"Creating directory: {path}")
        os.makedirs(path, mode=DIRECTORY_MODE, exist_ok=True)
        return

    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryPathError(
            f"create dir {path}: not a directory",
            path=str(path)
        )


def path_exists(path: StrPath) -> bool:
    """Report whether path exists. Any stat failure counts as absent."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def is_dir(path: StrPath) -> bool:
    """Report whether path is a directory. Any stat failure counts as False."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(st.st_mode)


def is_regular_file(path: StrPath) -> bool:
    """Report whether path is a regular file. Any stat failure counts as False."""
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(st.st_mode)


def delete_file(path: StrPath) -> None:
    """
    Delete a single file. Directories are never removed.

    Raises:
        PathNotExistError: If path does not exist
        IsDirectoryError: If path is a directory
        OSError: If removal fails
    """
    if not path_exists(path):
        raise PathNotExistError(f"delete file {path}: file does not exist", path=str(path))
    if is_dir(path):
        raise IsDirectoryError(
            f"delete file {path}: is a directory instead of a file",
            path=str(path)
        )

    logger.debug(f"Deleting file: {path}")
    os.remove(path)


def delete_files(*paths: StrPath) -> None:
    """Delete every given file, ignoring individual failures.

    Every path is attempted; nothing is reported back to the caller.
    """
    for path in paths:
        try:
            delete_file(path)
        except (FileUtilError, OSError) as e:
            logger.debug(f"Skipping {path}: {e}")


def _mode_for_flags(flags: int) -> str:
    """Map os.open() flags to the matching binary file object mode."""
    access = flags & (os.O_RDONLY | os.O_WRONLY | os.O_RDWR)
    append = flags & os.O_APPEND

    if access == os.O_WRONLY:
        return "ab" if append else "wb"
    if access == os.O_RDWR:
        return "a+b" if append else "r+b"
    return "rb"


def _open(path: StrPath, flags: int, perm: int) -> BinaryIO:
    fd = os.open(path, flags | _BINARY_FLAG, perm)
    try:
        return os.fdopen(fd, _mode_for_flags(flags))
    except BaseException:
        os.close(fd)
        raise


def open_file(
    path: StrPath,
    flags: int = os.O_RDONLY,
    perm: int = DEFAULT_FILE_MODE,
) -> BinaryIO:
    """
    Open a file, creating its parent directories first when it is new.

    Flags and permission bits are handed to os.open() as given, so creating
    the file itself still requires os.O_CREAT in flags.

    Args:
        path: File to open
        flags: os.O_* flags
        perm: Permission bits used if the file is created

    Returns:
        Binary file object; the caller closes it

    Raises:
        NotADirectoryPathError: If a parent path exists as a non-directory
        OSError: If the directories or the file cannot be created or opened
    """
    if path_exists(path):
        return _open(path, flags, perm)

    directory = parent_dir(path)
    if directory != os.curdir:
        create_directory(directory)

    return _open(path, flags, perm)


def link(src: StrPath, link_name: StrPath) -> None:
    """
    Create a hard link named link_name pointing at src.

    An existing link_name is deleted first.

    Raises:
        IsDirectoryError: If link_name is an existing directory
        OSError: If the link cannot be created (e.g. across devices)
    """
    if path_exists(link_name):
        delete_file(link_name)

    logger.debug(f"Linking {link_name} -> {src}")
    os.link(src, link_name)


def copy_file(src: StrPath, dst: StrPath, buffer_size: int = BUFFER_SIZE) -> None:
    """
    Copy src to a new file dst. Never overwrites.

    A failure part way through leaves a truncated dst behind.

    Args:
        src: Regular file to copy
        dst: Destination path; missing parent directories are created
        buffer_size: Bytes read per iteration

    Raises:
        NotRegularFileError: If src is not a regular file
        DestinationExistsError: If dst already exists
        OSError: If reading or writing fails
    """
    if not is_regular_file(src):
        raise NotRegularFileError(f"copy file {src}: not a regular file", src=str(src))

    with open_file(src, os.O_RDONLY) as source:
        if path_exists(dst):
            raise DestinationExistsError(
                f"copy file {dst}: destination already exists",
                src=str(src),
                dst=str(dst)
            )

        logger.debug(f"Copying {src} -> {dst}")
        with open_file(dst, COPY_FLAGS, COPY_FILE_MODE) as target:
            while chunk := source.read(buffer_size):
                target.write(chunk)


def move_file(src: StrPath, dst: StrPath) -> None:
    """
    Rename src to dst, replacing a stale file at dst.

    A directory at dst is left alone; the rename then fails on its own.

    Raises:
        NotRegularFileError: If src is not a regular file
        OSError: If the rename fails
    """
    if not is_regular_file(src):
        raise NotRegularFileError(f"move file {src}: not a regular file", src=str(src))

    if path_exists(dst) and not is_dir(dst):
        delete_file(dst)

    logger.debug(f"Moving {src} -> {dst}")
    os.rename(src, dst)


def move_file_after_check_md5(src: StrPath, dst: StrPath, md5: str) -> None:
    """
    Move src to dst only if its MD5 digest equals md5.

    Raises:
        NotRegularFileError: If src is not a regular file
        DigestMismatchError: If the digest differs; nothing is moved
        OSError: If the rename fails
    """
    if not is_regular_file(src):
        raise NotRegularFileError(
            f"move file with md5 check {src}: not a regular file",
            src=str(src)
        )

    actual = md5_sum(src)
    if actual != md5:
        raise DigestMismatchError(
            f"move file with md5 check {src}: md5 of source file does not match {md5!r}",
            src=str(src),
            dst=str(dst),
            expected=md5,
            actual=actual
        )

    move_file(src, dst)


def md5_sum(path: StrPath) -> str:
    """
    Compute the MD5 digest of a file.

    Returns:
        Lowercase hex digest, or "" if path is not a regular file or
        cannot be fully read
    """
    if not is_regular_file(path):
        return ""

    try:
        return compute_md5(path, BUFFER_SIZE)
    except OSError as e:
        logger.debug(f"Cannot compute md5 of {path}: {e}")
        return ""
