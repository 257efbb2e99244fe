"""Redirections - opening targets and retargeting standard streams.

Targets are opened as raw descriptors so they can be handed to a child
process directly, or installed in place of the interpreter's own fd 1 or
fd 2 while a builtin runs.
"""

import logging
import os
import sys
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from ..types import Command, RedirectTarget
from .errors import RedirectionError

logger = logging.getLogger(__name__)

STDOUT_FILENO = 1
STDERR_FILENO = 2

FILE_MODE = 0o666


@dataclass
class OpenedTargets:
    """Descriptors opened for one command's redirections."""

    stdout: Optional[int] = None
    stderr: Optional[int] = None

    def close(self) -> None:
        """Close every descriptor still held."""
        for attr in ("stdout", "stderr"):
            fd = getattr(self, attr)
            if fd is not None:
                setattr(self, attr, None)
                os.close(fd)


def open_target(target: RedirectTarget) -> int:
    """Open a redirection target for writing, creating it if needed."""
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if target.append else os.O_TRUNC
    try:
        return os.open(target.path, flags, FILE_MODE)
    except (OSError, ValueError) as e:
        # ValueError: the path holds a NUL character
        raise RedirectionError(target.path, e) from e


def open_targets(command: Command) -> OpenedTargets:
    """Open the stdout then stderr target of a command.

    If the second open fails, the first descriptor is closed before the
    error propagates.
    """
    opened = OpenedTargets()
    try:
        if command.stdout is not None:
            opened.stdout = open_target(command.stdout)
        if command.stderr is not None:
            opened.stderr = open_target(command.stderr)
    except RedirectionError:
        opened.close()
        raise
    logger.debug("opened targets stdout=%s stderr=%s", opened.stdout, opened.stderr)
    return opened


def flush_python_streams() -> None:
    """Flush Python-level stdout and stderr before descriptors change."""
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            try:
                stream.flush()
            except (OSError, ValueError):
                pass


@contextmanager
def redirected_stream(target_fd: Optional[int], fd: int) -> Iterator[None]:
    """Install target_fd in place of fd for the duration of the block.

    The original descriptor is duplicated first and put back on every
    exit path; the saved duplicate is then closed. A target_fd of None
    leaves fd untouched.
    """
    if target_fd is None:
        yield
        return

    flush_python_streams()
    saved = os.dup(fd)
    try:
        os.dup2(target_fd, fd)
        yield
    finally:
        flush_python_streams()
        try:
            os.dup2(saved, fd)
        finally:
            os.close(saved)


@contextmanager
def redirected_streams(opened: OpenedTargets) -> Iterator[None]:
    """Retarget the interpreter's stdout and stderr to opened descriptors."""
    with ExitStack() as stack:
        stack.enter_context(redirected_stream(opened.stdout, STDOUT_FILENO))
        stack.enter_context(redirected_stream(opened.stderr, STDERR_FILENO))
        yield


def write_fd(fd: int, text: str) -> None:
    """Write all of text to a raw descriptor."""
    data = text.encode("utf-8", errors="surrogateescape")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
