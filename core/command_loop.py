# core/command_loop.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from core.command import handle_command

log = logging.getLogger(__name__)

PROMPT = "Enter what you want to convert (or exit): "
EXIT_COMMAND = "exit"


def run(
    *,
    read_line: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> int:
    """
    Prompt, read one line, answer it; repeat until the exit command or
    end of input. Returns the number of successful conversions.

    `read_line` behaves like input() (the default): it shows the prompt and
    raises EOFError when input is exhausted. `write` gets one line at a time
    and defaults to print().
    """
    read_line = read_line or input
    write = write or print
    converted = 0

    log.info("Command loop started")
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            log.info("End of input")
            break

        line = (line or "").strip()
        if not line:
            continue
        if line.lower() == EXIT_COMMAND:
            break

        reply = handle_command(line)
        write(reply.text)
        if reply.ok:
            write("")
            converted += 1

    log.info("Command loop finished after %s conversion(s)", converted)
    return converted
