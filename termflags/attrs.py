"""Acquire terminal attributes from a descriptor or device path."""

import errno
import logging
import os
import re
import termios
from collections.abc import Iterator
from contextlib import contextmanager

from .types import TerminalAttributes

logger = logging.getLogger(__name__)

_DESCRIPTOR = re.compile(r"[+-]?[0-9]+")


class TerminalError(RuntimeError):
    """Raised when a target cannot be opened or queried."""

    def __init__(self, operation: str, strerror: str) -> None:
        super().__init__(f"{operation}: {strerror}")
        self.operation = operation
        self.strerror = strerror


def _strerror(exc: BaseException) -> str:
    # termios.error carries (errno, message) in args, OSError has strerror
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    if len(exc.args) == 2 and isinstance(exc.args[1], str):
        return exc.args[1]
    return str(exc)


def resolve_target(target: str | None) -> tuple[int | str, bool]:
    """Decide whether target names a descriptor or a path.

    Only an optionally signed run of decimal digits is a descriptor.

    Returns:
        Tuple of (fd or path, needs_open). A missing or empty target means stdin.
    """
    if not target:
        return 0, False
    if _DESCRIPTOR.fullmatch(target):
        return int(target), False
    return target, True


def open_target(path: str) -> int:
    """Open path read-only without making it the controlling terminal."""
    try:
        return os.open(path, os.O_RDONLY | os.O_NOCTTY)
    except OSError as exc:
        raise TerminalError(f"open({path})", _strerror(exc)) from exc


def get_attributes(fd: int) -> TerminalAttributes:
    """Query the terminal attributes of fd."""
    try:
        raw = termios.tcgetattr(fd)
    except (termios.error, OSError) as exc:
        raise TerminalError("tcgetattr", _strerror(exc)) from exc
    except (ValueError, OverflowError) as exc:
        # negative or oversized descriptor numbers never reach the kernel
        raise TerminalError("tcgetattr", os.strerror(errno.EBADF)) from exc

    logger.debug("tcgetattr(%d) = %r", fd, raw[:6])
    return TerminalAttributes.from_tcgetattr(raw)


@contextmanager
def terminal(target: str | None) -> Iterator[int]:
    """Yield a descriptor for target, closing it afterwards if it was opened here."""
    fd_or_path, needs_open = resolve_target(target)
    if not needs_open:
        logger.debug("using descriptor %s", fd_or_path)
        yield int(fd_or_path)
        return

    fd = open_target(str(fd_or_path))
    logger.debug("opened %s as descriptor %d", fd_or_path, fd)
    try:
        yield fd
    finally:
        os.close(fd)


def read_attributes(target: str | None) -> TerminalAttributes:
    """Open target if needed and return its terminal attributes."""
    with terminal(target) as fd:
        return get_attributes(fd)
