"""Filesystem utilities for staging and verifying downloaded files."""

from .errors import (
    FileUtilError,
    PathNotExistError,
    NotADirectoryPathError,
    IsDirectoryError,
    NotRegularFileError,
    DestinationExistsError,
    DigestMismatchError,
)
from .file_util import (
    BUFFER_SIZE,
    create_directory,
    path_exists,
    is_dir,
    is_regular_file,
    delete_file,
    delete_files,
    open_file,
    link,
    copy_file,
    move_file,
    move_file_after_check_md5,
    md5_sum,
)

__all__ = [
    'FileUtilError',
    'PathNotExistError',
    'NotADirectoryPathError',
    'IsDirectoryError',
    'NotRegularFileError',
    'DestinationExistsError',
    'DigestMismatchError',
    'BUFFER_SIZE',
    'create_directory',
    'path_exists',
    'is_dir',
    'is_regular_file',
    'delete_file',
    'delete_files',
    'open_file',
    'link',
    'copy_file',
    'move_file',
    'move_file_after_check_md5',
    'md5_sum',
]
