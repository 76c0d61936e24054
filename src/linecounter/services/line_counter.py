# src/linecounter/services/line_counter.py
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class LineCountResult:
    """Either a non-negative line count or the reason counting failed."""
    count: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, count: int) -> "LineCountResult":
        return cls(count=count)

    @classmethod
    def failure(cls, reason: str) -> "LineCountResult":
        return cls(error=reason)


def count_lines_in_file(path: Union[str, Path]) -> LineCountResult:
    """
    Counts the lines of a file.

    Every b"\\n" ends a line; non-empty trailing content without a final
    newline counts as one more line. The file is read as raw bytes, so no
    decoding is involved and a lone b"\\r" is not a line boundary.

    Args:
        path: File to count.

    Returns:
        A successful result with the count, or a failure carrying the I/O error text
        (missing file, permission denied, directory, unrepresentable path).
    """
    count = 0
    last_byte = b""
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(CHUNK_SIZE)
                if not chunk:
                    break
                count += chunk.count(b"\n")
                last_byte = chunk[-1:]
    except (OSError, ValueError) as e:
        # ValueError: paths the OS cannot represent, e.g. an embedded NUL byte
        logger.warning("Could not count lines in %s: %s", path, e)
        return LineCountResult.failure(str(e))

    if last_byte and last_byte != b"\n":
        count += 1

    logger.debug("Counted %d lines in %s", count, path)
    return LineCountResult.success(count)
