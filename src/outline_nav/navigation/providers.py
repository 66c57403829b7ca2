"""Terminal selection provider and line jumpers."""

import logging
import os
import shlex
import subprocess
import sys
from typing import Callable, Optional, Sequence, TextIO

from ..exceptions import JumpError, SelectionCancelled

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vi"

# Inputs that abandon the prompt instead of choosing an option
CANCEL_INPUTS = {"", "q", "quit"}


class TerminalSelectionProvider:
    """
    Numbered menu on a text stream.

    The user answers with an option number or the exact option label.
    Empty input, "q", "quit", EOF, and Ctrl-C cancel the session, so a
    heading titled "q" or "quit" can only be chosen by its number. A heading
    titled "." shares its label with the current entry and always resolves
    to the current entry.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
    ):
        self.input_func = input_func or input
        self.output = output or sys.stdout

    def present(self, prompt: str, options: Sequence[str]) -> str:
        for number, label in enumerate(options):
            print(f"  [{number}] {label}", file=self.output)

        while True:
            try:
                answer = self.input_func(prompt).strip()
            except (EOFError, KeyboardInterrupt):
                raise SelectionCancelled("Selection aborted")

            if answer.lower() in CANCEL_INPUTS:
                raise SelectionCancelled("Selection aborted")
            if answer.isdecimal() and int(answer) < len(options):
                return options[int(answer)]
            if answer in options:
                return answer
            print(f"  No such entry: {answer}", file=self.output)


class PrintJumper:
    """Report the target as ``name:line`` on a text stream."""

    def __init__(self, name: str, output: Optional[TextIO] = None):
        self.name = name
        self.output = output or sys.stdout

    def jump_to_line(self, line: int) -> None:
        print(f"{self.name}:{line}", file=self.output)


def resolve_editor() -> str:
    """Editor command from OUTLINE_NAV_EDITOR, VISUAL, or EDITOR."""
    for var in ("OUTLINE_NAV_EDITOR", "VISUAL", "EDITOR"):
        value = os.environ.get(var, "").strip()
        if value:
            return value
    return DEFAULT_EDITOR


class EditorJumper:
    """Open a local file in an editor positioned at the line (``+N`` convention)."""

    def __init__(self, file_path: str, editor: Optional[str] = None):
        self.file_path = file_path
        self.editor = editor or resolve_editor()

    def command(self, line: int) -> list[str]:
        return [*shlex.split(self.editor), f"+{line}", self.file_path]

    def jump_to_line(self, line: int) -> None:
        command = self.command(line)
        logger.debug("Running editor: %s", command)
        try:
            result = subprocess.run(command, check=False)
        except OSError as e:
            logger.warning("Could not start editor %r: %s", self.editor, e)
            raise JumpError(f"Could not start editor {self.editor!r}: {e}") from e
        if result.returncode != 0:
            logger.warning("Editor exited with status %d", result.returncode)
