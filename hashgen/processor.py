"""
Per-file pipeline: hash, write the report, optionally delete the source.

Every failure is contained to the file it happened on. ``process_files``
always returns one ``FileResult`` per input and never raises for a single
bad file.
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence
from tqdm import tqdm
from .digest import compute_file_digests
from .hashers import Hasher, get_hashers
from .report import write_report
from .scanner import PathArgument, expand_paths

logger = logging.getLogger(__name__)


@dataclass
class ProcessOptions:
    delete_after: bool = False
    verbose: bool = False


@dataclass
class FileResult:
    path: Path
    report_path: Optional[Path] = None
    digests: Optional[Dict[str, str]] = None
    deleted: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_file(path: Path, options: ProcessOptions,
                 hashers: Optional[Sequence[Hasher]] = None) -> FileResult:
    """Process a single file and record what happened to it."""
    result = FileResult(path=Path(path))
    try:
        logger.info(f"Generating hash for {path}")
        result.digests = compute_file_digests(result.path, hashers)
        result.report_path = write_report(result.path, result.digests)
        if options.delete_after:
            logger.info(f"Deleting file {path}")
            os.remove(result.path)
            result.deleted = True
    except Exception as e:
        result.error = str(e)
        logger.error(result.error)
    return result


def process_files(entries: Iterable[Path], options: ProcessOptions,
                  hashers: Optional[Sequence[Hasher]] = None,
                  progress: bool = False) -> List[FileResult]:
    """Process ``entries`` one at a time, in order."""
    if hashers is None:
        hashers = get_hashers()
    entries = list(entries)
    results = []
    for path in tqdm(entries, desc="Hashing files", unit="file", disable=not progress):
        results.append(process_file(path, options, hashers))

    failed = sum(1 for r in results if not r.ok)
    logger.debug(f"Processed {len(results)} files, {failed} failed")
    return results


def run(paths: Iterable[PathArgument], options: ProcessOptions,
        hashers: Optional[Sequence[Hasher]] = None,
        progress: bool = False) -> List[FileResult]:
    """Expand ``paths`` and process every file found."""
    if options.verbose and options.delete_after:
        logger.info("Deleting files after hashing")
    return process_files(expand_paths(paths), options, hashers, progress)
