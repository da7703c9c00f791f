"""Line sources for the pipeline: stdin or a checked list of log files.

Input paths are resolved and checked up front by ``resolve_inputs`` so that
a bad path stops the run before any report output is written.
"""

import glob
import gzip
import logging
import os
import sys
from typing import Generator, Iterable, TextIO

from searchwords.config import ConfigError

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


def _is_pattern(arg: str) -> bool:
    return glob.escape(arg) != arg


def _check_readable(path: str) -> None:
    if not os.access(path, os.R_OK):
        raise ConfigError(f"Cannot read log file: {path}")
    if path.endswith(".gz"):
        with open(path, "rb") as f:
            if f.read(2) != GZIP_MAGIC:
                raise ConfigError(f"Not a gzip file: {path}")


def _candidates(arg: str) -> list[str]:
    """Regular files named by one argument, a plain path or a glob pattern."""
    if not _is_pattern(arg):
        if os.path.isdir(arg):
            raise ConfigError(f"Not a file: {arg}")
        if not os.path.isfile(arg):
            raise ConfigError(f"File not found: {arg}")
        return [arg]

    matches = sorted(glob.glob(arg))
    files = [m for m in matches if os.path.isfile(m)]
    for skipped in set(matches) - set(files):
        logger.debug("Skipping %s matched by %s: not a regular file", skipped, arg)
    if not files:
        raise ConfigError(f"No log files match {arg}")
    return files


def resolve_inputs(args: Iterable[str]) -> list[str]:
    """Turn command-line paths and globs into readable files, in order.

    A file named more than once is read once. Raises ConfigError for
    missing, unreadable, or non-gzip ``.gz`` files and for globs that match
    no regular file.
    """
    # dict keeps first-seen order while dropping repeats
    paths = dict.fromkeys(p for arg in args for p in _candidates(arg))
    for path in paths:
        _check_readable(path)
    return list(paths)


def open_log(path: str) -> TextIO:
    if path.endswith(".gz"):
        return gzip.open(path, "rt", encoding="utf-8", errors="replace")
    return open(path, "r", encoding="utf-8", errors="replace")


def read_lines(path: str) -> Generator[str, None, None]:
    """Yield each line of one log file, decompressing ``.gz`` files."""
    with open_log(path) as f:
        yield from f


def read_files(paths: Iterable[str]) -> Generator[str, None, None]:
    """Yield the lines of every file in turn."""
    for path in paths:
        logger.debug("Reading %s", path)
        yield from read_lines(path)


def read_stream(stream: TextIO | None = None) -> Generator[str, None, None]:
    """Yield lines from *stream*, stdin by default."""
    yield from stream if stream is not None else sys.stdin
