"""Start a program with one end of a pipe connected to it."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

__all__ = ["popen"]


class _PipeFile:
    """Binary pipe to a child process; closing it waits for the child."""

    def __init__(self, stream, process: subprocess.Popen) -> None:
        self._stream = stream
        self.process = process

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def readline(self, size: int = -1) -> bytes:
        return self._stream.readline(size)

    def write(self, data: bytes) -> int:
        return self._stream.write(data)

    def fileno(self) -> int:
        return self._stream.fileno()

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def close(self) -> int:
        """Close the pipe, wait for the child and return its exit status."""
        if not self._stream.closed:
            self._stream.close()
        return self.process.wait()

    def __iter__(self):
        return iter(self._stream)

    def __enter__(self) -> "_PipeFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def popen(file: str, argv: Sequence[str], mode: str) -> _PipeFile:
    """Run ``file`` with arguments ``argv`` and return one end of a pipe.

    With mode ``"r"`` the returned pipe reads the program's standard output;
    with mode ``"w"`` it writes to the program's standard input.  ``file`` is
    looked up on ``PATH`` and ``argv`` is the argument vector it receives,
    ``argv[0]`` included.  Raises ValueError for a missing file or argument
    vector or an unknown mode, and OSError when the program cannot be started.
    """
    if not file or not argv or mode not in ("r", "w"):
        raise ValueError("popen needs a file, an argument vector and mode 'r' or 'w'")

    if mode == "r":
        process = subprocess.Popen(
            list(argv), executable=file, stdout=subprocess.PIPE, bufsize=0
        )
        return _PipeFile(process.stdout, process)

    process = subprocess.Popen(
        list(argv), executable=file, stdin=subprocess.PIPE, bufsize=0
    )
    return _PipeFile(process.stdin, process)