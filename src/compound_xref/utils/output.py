"""
Output sink for newline-delimited JSON.

``open_output`` is the only place the output stream is acquired; it is
flushed and (for files) closed on every exit path.
"""

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from compound_xref.constants import OUTPUT_DIR_MODE, STDOUT_MARKER

logger = logging.getLogger(__name__)


def resolve_output_path(output: str | Path | None) -> Path | None:
    """Return the absolute output path, or None for standard output."""
    if output is None or str(output) in ("", STDOUT_MARKER):
        return None
    return Path(os.path.abspath(output))


@contextmanager
def open_output(output: str | Path | None) -> Iterator[TextIO]:
    """Yield a writable text stream for ``output``.

    None, "" or "-" select standard output, which is flushed but left open.
    Any other value is a file path; missing parent directories are created.
    """
    path = resolve_output_path(output)
    if path is None:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    path.parent.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
    logger.debug("Writing output to %s", path)
    with open(path, "w", encoding="utf-8") as f:
        yield f


def write_line(sink: TextIO, line: str) -> None:
    """Write one record and flush so it survives an abrupt stop."""
    sink.write(line + "\n")
    sink.flush()
