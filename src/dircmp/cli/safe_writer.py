"""Signal-aware output writing for the dircmp CLI."""

import errno
import os
import types
from pathlib import Path
from typing import IO, Iterable, Optional, Type, Union

from dircmp.cli.signal_handler import SignalHandler, signal_handler


class SafeWriter:
    """Write text to a file descriptor or file path, stopping on interruption.

    Writes go straight to the descriptor with ``os.write``. A pending SIGPIPE or
    SIGINT, or an EPIPE from the write itself, surfaces as BrokenPipeError so the
    caller can stop producing output.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, os.PathLike], handler: Optional[SignalHandler] = None):
        """Open ``file`` for writing unless it already is a descriptor.

        Raises:
            TypeError: If ``file`` is neither a descriptor nor a path.
        """
        self.file = file
        self._handler = handler if handler is not None else signal_handler
        self._closed = False
        self._file_obj: Optional[IO[str]] = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` encoded as UTF-8.

        Undecodable bytes that ``os.listdir`` carried into file names as lone
        surrogates are written back as the original bytes.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is closed.
            ValueError: If the writer is closed.
            OSError: For any other write failure.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if self._handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8", errors="surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_all(self, chunks: Iterable[str]) -> None:
        for chunk in chunks:
            self.write(chunk)

    def close(self) -> None:
        """Close the file if this writer opened it. Idempotent."""
        if self._closed:
            return

        try:
            if self._file_obj is not None:
                self._file_obj.close()
        except OSError as e:
            if e.errno != errno.EPIPE:
                raise
        finally:
            self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        # An exception from the with block takes priority over one from close()
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
