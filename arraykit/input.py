"""Reading raw lines and menu commands from an input stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .util import CmdOutOfContextError, InputOverflowError, char_to_int

MAX_SIZE = 1024 * 1024
COMMAND_LIMIT = 47
PROMPT = ">> "


def receiver(stream: TextIO | None = None) -> str:
    """Read one line, newline included, of at most ``MAX_SIZE`` characters.

    Raises ``InputOverflowError`` when the line is longer than the limit.
    """
    source = stream if stream is not None else sys.stdin
    line = source.readline(MAX_SIZE + 1)
    if len(line) > MAX_SIZE:
        raise InputOverflowError()
    return line


def cmd_input(context: int, stream: TextIO | None = None) -> int:
    """Prompt for a menu command and return it as a number.

    The command must be a non-negative integer no greater than ``context``.
    Raises ``EOFError`` when the stream is exhausted.
    """
    source = stream if stream is not None else sys.stdin
    print(PROMPT, end="", flush=True)
    line = source.readline()
    if line == "":
        raise EOFError("no more input")
    command = char_to_int(line[:COMMAND_LIMIT])
    if command > context:
        raise CmdOutOfContextError()
    return command