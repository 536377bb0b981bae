""" Recognize shell operators in an argument vector. """
from typing import Optional

from command import Command, ExecutionFlags
from constants import (BACKGROUND, OPERATORS, PIPE, REDIRECT_APPEND,
                       REDIRECT_IN, REDIRECT_OUT)


def _filename_pos(vector, i, tok) -> int:
    """ Return the index of the filename following the operator at i. """
    pos = i + 1
    if pos >= len(vector) or vector[pos] is None or vector[pos] in OPERATORS:
        raise SyntaxError(f"syntax error: expected filename after '{tok}'")
    return pos


def classify(argv: list[Optional[str]]) -> tuple[list[Optional[str]], ExecutionFlags]:
    """
    Strip operators out of argv.

    Every operator slot is replaced with None, which terminates the argument
    list of the command it follows. Scanning stops at the first None already
    present, so classifying a classified vector finds nothing new.
    Returns the new vector and the flags describing the operators found.
    """
    vector = list(argv)
    background = False
    input_pos = None
    output_pos = None
    append = False
    pipe_pos = None

    for i, tok in enumerate(vector):
        if tok is None:
            break
        if tok == BACKGROUND:
            vector[i] = None
            background = True
        elif tok == REDIRECT_IN:
            input_pos = _filename_pos(vector, i, tok)
            vector[i] = None
        elif tok in (REDIRECT_OUT, REDIRECT_APPEND):
            output_pos = _filename_pos(vector, i, tok)
            append = (tok == REDIRECT_APPEND)
            vector[i] = None
        elif tok == PIPE:
            if pipe_pos is not None:
                raise SyntaxError("syntax error: only one '|' is supported")
            vector[i] = None
            pipe_pos = i + 1

    flags = ExecutionFlags(
        background=background,
        input_pos=input_pos,
        output_pos=output_pos,
        append=append,
        pipe_pos=pipe_pos,
    )
    return vector, flags


def _words(vector, start, stop) -> list[str]:
    words = []
    for tok in vector[start:stop]:
        if tok is None:
            break
        words.append(tok)
    return words


def _make_command(words, side) -> Command:
    if not words:
        raise SyntaxError(f"syntax error: missing {side} command")
    return Command(words[0], words[1:])


def build_commands(vector, flags: ExecutionFlags) -> tuple[Command, Optional[Command]]:
    """
    Split a classified vector into the left command and, for a pipe, the
    right command. Redirections go to whichever side their filename sits on.
    """
    if not flags.is_pipe:
        left = _make_command(_words(vector, 0, len(vector)), "left")
        right = None
    else:
        left = _make_command(_words(vector, 0, flags.pipe_pos - 1), "left")
        right = _make_command(_words(vector, flags.pipe_pos, len(vector)), "right")

    def side_of(pos):
        if right is None or pos < flags.pipe_pos:
            return left
        return right

    if flags.input_redirect:
        side_of(flags.input_pos).stdin = vector[flags.input_pos]
    if flags.output_pos is not None:
        target = side_of(flags.output_pos)
        target.stdout = vector[flags.output_pos]
        target.append = flags.append

    return left, right
