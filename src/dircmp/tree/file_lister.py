"""Entry classification and flat recursive file listing."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from dircmp.exceptions import ComparisonIOError
from dircmp.types import FileType, PathType

logger = logging.getLogger(__name__)


def get_file_type(path: Path) -> Optional[FileType]:
    """Classify ``path`` without following symbolic links.

    Symlinks are reported as SYMLINK whatever they point to, so a link to a
    directory is never descended into. Entries that are neither (sockets, FIFOs,
    device nodes) yield None.

    Example:
        >>> get_file_type(Path("/"))
        <FileType.DIRECTORY: 'directory'>
    """
    if path.is_symlink():
        return FileType.SYMLINK
    if path.is_dir():
        return FileType.DIRECTORY
    if path.is_file():
        return FileType.FILE
    return None


def list_directory(directory: PathType) -> List[Path]:
    """Return the immediate children of ``directory``, sorted by name.

    Raises:
        ComparisonIOError: If the directory cannot be listed.
    """
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise ComparisonIOError(directory, e) from e
    return [Path(directory) / name for name in names]


def list_files(directory: PathType) -> List[Path]:
    """Recursively list every regular file beneath ``directory``.

    The walk is depth-first in name order. Symlinks are skipped at every level and
    directories themselves are never part of the result.

    Raises:
        ComparisonIOError: If any directory in the subtree cannot be listed.

    Example:
        >>> list_files("/path/to/project")  # doctest: +SKIP
        [PosixPath('/path/to/project/a.txt'), PosixPath('/path/to/project/sub/b.txt')]
    """
    result: List[Path] = []
    for entry in list_directory(directory):
        file_type = get_file_type(entry)
        if file_type is FileType.DIRECTORY:
            result.extend(list_files(entry))
        elif file_type is FileType.FILE:
            result.append(entry)
        else:
            logger.debug("Skipping %s while listing files", entry)
    return result
