"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator

BUFFER_SIZE = 100


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: AnyStr | None = None

    def _fill(self) -> None:
        while True:
            if self._buffer is not None:
                newline = "\n" if isinstance(self._buffer, str) else b"\n"
                if newline in self._buffer:
                    return
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                return
            self._buffer = chunk if self._buffer is None else self._buffer + chunk

    def readline(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        self._fill()
        if not self._buffer:
            return None
        newline = "\n" if isinstance(self._buffer, str) else b"\n"
        index = self._buffer.find(newline)
        if index < 0:
            line, self._buffer = self._buffer, self._buffer[:0]
        else:
            line = self._buffer[: index + 1]
            self._buffer = self._buffer[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)