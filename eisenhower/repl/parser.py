"""
FILE: eisenhower/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
NOTES:
  - Handles quoted strings: add "call the bank"
  - Supports flags: --from inbox, --json
  - Case-insensitive command names; args keep their case
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Union


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "drag", "drop")
        args: Positional arguments (e.g., ["1a2b3c", "do"])
        flags: Flag arguments as dict (e.g., {"from": "inbox"})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, Union[str, bool]] = field(default_factory=dict)
    raw_input: str = ""

    @property
    def text(self) -> str:
        """Positional args joined back into one string (for free text)."""
        return " ".join(self.args)


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command('add "Call the bank"')
        ParseResult(command="add", args=["Call the bank"], flags={})

        >>> parse_command("mv 1a2b do --from inbox")
        ParseResult(command="mv", args=["1a2b", "do"], flags={"from": "inbox"})

        >>> parse_command("ls --json")
        ParseResult(command="ls", args=[], flags={"json": True})

    Notes:
        - "--name value" sets a value flag; "--name" followed by another
          flag or nothing sets a boolean flag
        - Unbalanced quotes fall back to whitespace splitting
        - Empty input returns command=""
    """
    input_str = input_str.strip()

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    result = ParseResult(command=tokens[0].lower(), raw_input=input_str)

    rest = iter(enumerate(tokens[1:], start=1))
    for i, token in rest:
        if not token.startswith("--"):
            result.args.append(token)
            continue

        name = token[2:]
        has_value = i + 1 < len(tokens) and not tokens[i + 1].startswith("--")
        if has_value:
            _, value = next(rest)
            result.flags[name] = value
        else:
            result.flags[name] = True

    return result
