"""
Path expansion for hashgen.

Turns a mixed list of file and directory arguments into a flat list of
regular files. Directories are walked depth-first with subdirectories
ahead of files at every level; siblings keep the order ``os.scandir``
returns them in.
"""
import os
import logging
from pathlib import Path
from typing import Generator, Iterable, List, Set, Union

logger = logging.getLogger(__name__)

PathArgument = Union[str, "os.PathLike[str]"]


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _walk_directory(directory: Path, ancestors: Set[str]) -> Generator[Path, None, None]:
    """Yield regular files under ``directory``, subdirectories first."""
    real = os.path.realpath(directory)
    if real in ancestors:
        logger.debug(f"Skipping {directory}: symlink loop back to {real}")
        return

    subdirs = []
    files = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_dir():
                        subdirs.append(Path(entry.path))
                    elif entry.is_file():
                        files.append(Path(entry.path))
                except OSError as e:
                    logger.debug(f"Cannot stat {entry.path}: {e}")
    except OSError as e:
        logger.debug(f"Cannot access directory {directory}: {e}")
        return

    ancestors.add(real)
    try:
        for subdir in subdirs:
            yield from _walk_directory(subdir, ancestors)
    finally:
        ancestors.discard(real)
    yield from files


def iter_files(paths: Iterable[PathArgument]) -> Generator[Path, None, None]:
    """
    Lazily expand ``paths`` into regular files.

    Paths that are neither a directory nor a regular file are skipped
    without raising. A path given twice is expanded twice.
    """
    for arg in paths:
        path = Path(arg)
        if _is_dir(path):
            yield from _walk_directory(path, set())
        elif _is_file(path):
            yield path
        else:
            logger.debug(f"Skipping {path}: not a file or directory")


def expand_paths(paths: Iterable[PathArgument]) -> List[Path]:
    """Expand ``paths`` into an ordered list of regular files."""
    return list(iter_files(paths))
