"""Classifies one line of interactive input as a control command or an answer."""

from dataclasses import dataclass
from enum import Enum

from kanadrill.domain.constants import COMMAND_PREFIX
from kanadrill.domain.errors import UnknownCommandError


class CommandKind(Enum):
    ANSWER = "answer"
    HELP = "help"
    WEIGHTS = "weights"
    QUIT = "quit"


COMMANDS: dict[str, CommandKind] = {
    f"{COMMAND_PREFIX}h": CommandKind.HELP,
    f"{COMMAND_PREFIX}w": CommandKind.WEIGHTS,
    f"{COMMAND_PREFIX}q": CommandKind.QUIT,
}

HELP_TEXT = "\n".join(
    [
        "Available commands:",
        f"  {COMMAND_PREFIX}h        - Show this help message",
        f"  {COMMAND_PREFIX}w        - Show weights for current items",
        f"  {COMMAND_PREFIX}q        - Quit the study session",
        "  <answer> - Enter your answer for the current item",
    ]
)


@dataclass(frozen=True)
class ParsedInput:
    kind: CommandKind
    text: str = ""


def parse_input(line: str) -> ParsedInput:
    """
    Classify an already-trimmed input line.

    Anything not starting with the command prefix, the empty string
    included, is an answer and is kept verbatim.

    Raises:
        UnknownCommandError: prefixed input that names no known command.
    """
    kind = COMMANDS.get(line)
    if kind is not None:
        return ParsedInput(kind=kind)

    if line.startswith(COMMAND_PREFIX):
        raise UnknownCommandError("Unknown command")

    return ParsedInput(kind=CommandKind.ANSWER, text=line)
