"""
Input path expansion for Abeebus
"""

import glob
import os
from typing import Iterable, List

WILDCARDS = ("*", "?")

def expand_path(path: str) -> List[str]:
    """
    Expand a command-line path into the files it names

    Wildcard patterns expand to the matching files, directories expand to
    their top-level files. Anything that matches nothing is returned as-is
    so the caller reports it as unopenable.

    Args:
        path: File path, wildcard pattern or directory

    Returns:
        Sorted list of file paths
    """
    if any(char in path for char in WILDCARDS):
        files = sorted(p for p in glob.glob(path) if os.path.isfile(p))
        return files or [path]

    if os.path.isdir(path):
        files = sorted(
            entry.path for entry in os.scandir(path) if entry.is_file()
        )
        return files or [path]

    return [path]

def expand_paths(paths: Iterable[str]) -> List[str]:
    """Expand every path in order"""
    expanded = []
    for path in paths:
        expanded.extend(expand_path(path))
    return expanded
