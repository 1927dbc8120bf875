"""
Common utility functions for the texsync package.

This module provides utility functions used across the texsync package:
- File extension classification
- Deterministic directory enumeration
- Timestamp based staleness checks
"""

import os
from typing import List, Optional, Sequence

def ensure_dir(path: str) -> str:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path (str): Directory path

    Returns:
        str: The directory path
    """
    os.makedirs(path, exist_ok=True)
    return path

def get_file_extension(file_path: str) -> str:
    """
    Get the lower-cased file extension from a file path.

    Args:
        file_path (str): File path

    Returns:
        str: File extension including the dot (e.g. ".svg"), or "" if none
    """
    return os.path.splitext(file_path)[1].lower()

def has_extension(file_path: str, extensions: Sequence[str]) -> bool:
    """
    Check whether a file has one of the given extensions (case-insensitive).

    Args:
        file_path (str): File path
        extensions (Sequence[str]): Extensions including the dot

    Returns:
        bool: True if the extension matches
    """
    return get_file_extension(file_path) in [ext.lower() for ext in extensions]

def list_source_files(directory: str, extensions: Sequence[str]) -> List[str]:
    """
    List regular files in a directory with one of the given extensions.

    The result is sorted lexicographically by file name so that processing
    order does not depend on the platform's directory listing order.

    Args:
        directory (str): Directory to scan (not recursive)
        extensions (Sequence[str]): Extensions to accept

    Returns:
        List[str]: Paths of matching files
    """
    matches = []
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if os.path.isfile(path) and has_extension(name, extensions):
            matches.append(path)
    return matches

def get_mtime_ns(file_path: str) -> Optional[int]:
    """
    Get a file's modification time in nanoseconds.

    Args:
        file_path (str): File path

    Returns:
        Optional[int]: Modification time, or None if the file does not exist
    """
    try:
        return os.stat(file_path).st_mtime_ns
    except FileNotFoundError:
        return None

def is_stale(source_path: str, target_path: str) -> bool:
    """
    Check whether a target needs to be regenerated from its source.

    A target is stale when it is missing or strictly older than its source;
    equal timestamps count as fresh.

    Args:
        source_path (str): Source file path
        target_path (str): Target file path

    Returns:
        bool: True if the target is missing or older than the source
    """
    target_mtime = get_mtime_ns(target_path)
    if target_mtime is None:
        return True
    return os.stat(source_path).st_mtime_ns > target_mtime

def derive_target_path(source_path: str, target_dir: str, target_extension: str) -> str:
    """
    Derive a target path: same base name, new directory and extension.

    Args:
        source_path (str): Source file path
        target_dir (str): Directory of the target
        target_extension (str): Extension of the target including the dot

    Returns:
        str: Target file path
    """
    stem = os.path.splitext(os.path.basename(source_path))[0]
    return os.path.join(target_dir, stem + target_extension)
