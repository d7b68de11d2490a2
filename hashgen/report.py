"""
Report files: ``<file>.hashes.txt`` with one ``NAME:<tab>DIGEST`` line per
algorithm. Names shorter than eight characters get a second tab so the
digests line up in a terminal.
"""
import logging
from pathlib import Path
from typing import Dict, Mapping, Union
from .errors import ReportFormatError

logger = logging.getLogger(__name__)

REPORT_SUFFIX = ".hashes.txt"
ALIGN_WIDTH = 8


def report_path_for(path: Union[str, Path]) -> Path:
    """Append the report suffix; an existing extension is kept."""
    path = Path(path)
    return path.with_name(path.name + REPORT_SUFFIX)


def format_line(name: str, digest: str) -> str:
    pad = "\t" if len(name) < ALIGN_WIDTH else ""
    return f"{name}:\t{pad}{digest}\n"


def format_report(result: Mapping[str, str]) -> str:
    return "".join(format_line(name, digest) for name, digest in result.items())


def write_report(path: Union[str, Path], result: Mapping[str, str]) -> Path:
    """
    Write the report for ``path``, replacing any previous one.

    Returns the report path. OSErrors propagate to the caller.
    """
    report_path = report_path_for(path)
    if report_path.exists():
        logger.debug(f"Removing previous report {report_path}")
        report_path.unlink()
    with open(report_path, "w", encoding="ascii", newline="\n") as f:
        f.write(format_report(result))
    return report_path


def parse_report(text: str) -> Dict[str, str]:
    """Parse report text back into an ordered name -> digest mapping."""
    result: Dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        name, sep, rest = line.partition(":")
        digest = rest.lstrip("\t")
        if not sep or not name or not rest.startswith("\t") or not digest:
            raise ReportFormatError(f"Line {lineno} is not a report line: {line!r}")
        result[name] = digest
    return result


def read_report(path: Union[str, Path]) -> Dict[str, str]:
    """Read and parse the report file at ``path`` (the report itself, not its source)."""
    with open(path, "r", encoding="ascii") as f:
        return parse_report(f.read())
