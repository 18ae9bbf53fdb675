"""Output stream helpers."""

from typing import BinaryIO


class NoCloseStream:
    """Binary output stream with close() disabled.

    Several documents are often written in turn to one shared stream
    (an archive entry writer, a socket). Some writers close the stream
    they were handed once done; wrapping the shared stream keeps it
    open for the next document.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> int:
        return self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()

    def writable(self) -> bool:
        return True

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def close(self) -> None:
        """A close() that leaves the wrapped stream open."""
