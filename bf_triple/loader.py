"""Line-oriented reading of known-bad lists and candidate files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Union


logger = logging.getLogger(__name__)


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Yield each line of ``path`` without its line terminator.

    Lines end at ``\\n`` only; one trailing ``\\r`` (CRLF files) is dropped and
    any other ``\\r`` stays in the entry. Blank lines are yielded as empty
    strings. Undecodable bytes are kept as surrogate escapes, which the hash
    functions map back to the bytes found in the file.

    Raises:
        OSError: If the file cannot be opened or read. Raised on the first
            iteration, before any line is produced.
    """
    count = 0
    with open(path, "rb") as f:
        for raw in f:
            count += 1
            if raw.endswith(b"\n"):
                raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            yield raw.decode("utf-8", "surrogateescape")
    logger.debug("read %d lines from %s", count, path)
