"""Checksum utilities for file integrity verification."""

import hashlib
import os

from .path_utils import StrPath

# Read size used when streaming a file through the hash
MD5_CHUNK_SIZE = 8 * 1024 * 1024  # 8 MB chunks


def compute_md5(file_path: StrPath, chunk_size: int = MD5_CHUNK_SIZE) -> str:
    """
    Compute MD5 digest of entire file.
    
    Used for:
    - Verifying downloaded content before it is moved into place
    - Comparing copies of the same file
    
    Args:
        file_path: Path to the file
        chunk_size: Number of bytes read per iteration
        
    Returns:
        MD5 digest as 32-character lowercase hex string
        
    Raises:
        OSError: If file cannot be opened or read
    """
    md5 = hashlib.md5()
    
    with open(os.fspath(file_path), 'rb', buffering=0) as f:
        while chunk := f.read(chunk_size):
            md5.update(chunk)
    
    return md5.hexdigest()
