""" Rebind a standard stream of the current process to a file. """
import os

from constants import FILE_MODE, STDIN_FILENO, STDOUT_FILENO
from exceptions import RedirectionError

OPEN_FLAGS = {
    "r": os.O_RDONLY,
    "w": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "a": os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


def apply_redirection(path: str, mode: str) -> None:
    """
    Open path and make it the process's stdin (mode "r") or stdout
    (modes "w" and "a").

    Only called in a child between fork and exec. Raises RedirectionError
    when the file cannot be opened; the stream is left untouched then.
    """
    if mode not in OPEN_FLAGS:
        raise ValueError(f"unknown redirection mode: {mode!r}")
    target = STDIN_FILENO if mode == "r" else STDOUT_FILENO

    try:
        fd = os.open(path, OPEN_FLAGS[mode], FILE_MODE)
    except OSError as e:
        raise RedirectionError(path, e.strerror) from e

    if fd == target:
        # the stream was closed and open() reused its number
        os.set_inheritable(fd, True)
        return
    try:
        os.dup2(fd, target)
    finally:
        os.close(fd)
