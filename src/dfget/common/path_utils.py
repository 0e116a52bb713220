"""Path utilities for consistent path handling across packages."""

import os

# Anything os.fspath() turns into a str path
StrPath = str | os.PathLike[str]


def parent_dir(path: StrPath) -> str:
    """
    Return the directory component of a path.
    
    A bare file name (no directory component) yields the current directory
    marker ``"."``, so callers can tell "create in place" apart from
    "create inside some directory".
    
    Args:
        path: String or path-like object
        
    Returns:
        Parent directory as a normalized string
        
    Examples:
        >>> parent_dir("a.txt")
        '.'
        >>> parent_dir("sub/dir/new.txt")
        'sub/dir'
    """
    directory = os.path.dirname(os.fspath(path))
    if not directory:
        return os.curdir
    return os.path.normpath(directory)
