"""Output sink: one ``<line> <name> <complexity>`` line per function."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, Optional, Union

from .complexity.models import ComplexityRecord
from .exceptions import FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)


class RecordWriter:
    """Holds the sink open for a whole run.

    The file is truncated when opened and only appended to afterwards.
    Records are flushed as they are written so a crash part-way through a
    run keeps everything reported so far.

    Usage:
        with RecordWriter("output.cy") as sink:
            for record in records:
                sink.write(record)
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._handle: Optional[IO[str]] = None
        self.count = 0

    @property
    def handle(self) -> IO[str]:
        """Return the open file. Raises if not opened."""
        if self._handle is None:
            raise RuntimeError("RecordWriter is not open. Use as context manager or call open().")
        return self._handle

    # ── lifecycle ─────────────────────────────────────────────────

    def open(self) -> RecordWriter:
        """Open and truncate the sink."""
        try:
            self._handle = open(self.path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise FileAccessError(self.path, e.strerror or str(e))
        self.count = 0
        logger.debug(f"Output sink opened at {self.path}")
        return self

    def close(self) -> None:
        """Close the sink if open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug(f"Output sink closed after {self.count} record(s)")

    def __enter__(self) -> RecordWriter:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ── writing ───────────────────────────────────────────────────

    def write(self, record: ComplexityRecord) -> None:
        handle = self.handle
        handle.write(record.to_line() + "\n")
        handle.flush()
        self.count += 1

    def write_all(self, records: Iterable[ComplexityRecord]) -> None:
        for record in records:
            self.write(record)
