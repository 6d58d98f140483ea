"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol


class _Readable(Protocol[AnyStr]):
    def read(self, size: int = ...) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = 4096) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        stash = self._stash
        newline = None
        if stash is not None:
            newline = b"\n" if isinstance(stash, bytes) else "\n"
        while stash is None or newline not in stash:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if stash is None:
                stash = chunk
                newline = b"\n" if isinstance(chunk, bytes) else "\n"
            else:
                stash = stash + chunk
        if not stash:
            self._stash = None
            return None
        cut = stash.find(newline)  # type: ignore[arg-type]
        if cut == -1:
            line, rest = stash, stash[:0]
        else:
            line, rest = stash[: cut + 1], stash[cut + 1 :]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line