"""Line-by-line reading from a stream that is read in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream, ``buffer_size`` units at a time.

    Every line keeps its trailing newline. The last line of the stream is
    returned without one if the stream does not end with a newline. Data
    read past the current line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._separator: Optional[AnyStr] = None

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or the stream ends."""
        pending = self._pending
        while (
            pending is None
            or self._separator is None
            or self._separator not in pending
        ):
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                break
            if self._separator is None:
                if isinstance(chunk, (bytes, bytearray)):
                    self._separator = b"\n"  # type: ignore[assignment]
                else:
                    self._separator = "\n"  # type: ignore[assignment]
            pending = chunk if pending is None else pending + chunk
        self._pending = pending

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending or self._separator is None:
            self._pending = None
            return None
        end = pending.find(self._separator)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1 :]
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line