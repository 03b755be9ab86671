"""
FILE: taskboard/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
  - FLAG_ALIASES: Short flag -> long flag name
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: add "task with spaces"
  - Supports flags: --priority high, -p high, --desc="some text"
  - Preserves argument order for positional args
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

FLAG_ALIASES = {
    "d": "desc",
    "p": "priority",
    "t": "title",
    "s": "status",
}

# --description and --desc mean the same thing
FLAG_SYNONYMS = {
    "description": "desc",
}


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "mv", "edit")
        args: Positional arguments (e.g., ["task title", "1a2b"])
        flags: Flag arguments as dict (e.g., {"priority": "high", "json": True})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, Union[str, bool]] = field(default_factory=dict)
    raw_input: str = ""

    def flag_text(self, name: str) -> Optional[str]:
        """Return a flag's value as text, or None if absent or valueless."""
        value = self.flags.get(name)
        return value if isinstance(value, str) else None


def _flag_name(token: str) -> Optional[str]:
    """Return the flag name for a flag token, or None for positional tokens."""
    if token.startswith("--") and len(token) > 2:
        name = token[2:].lower()
    elif token.startswith("-") and len(token) == 2 and token[1].isalpha():
        name = FLAG_ALIASES.get(token[1].lower(), token[1].lower())
    else:
        return None
    return FLAG_SYNONYMS.get(name, name)


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Buy milk")
        ParseResult(command="add", args=["Buy", "milk"], flags={})

        >>> parse_command('add "Design Homepage" -p high')
        ParseResult(command="add", args=["Design Homepage"], flags={"priority": "high"})

        >>> parse_command("mv 1a2b done")
        ParseResult(command="mv", args=["1a2b", "done"], flags={})

        >>> parse_command("board --json")
        ParseResult(command="board", args=[], flags={"json": True})

    Notes:
        - Command is always the first token (case-insensitive)
        - "--name value", "--name=value" and "-x value" are value flags
        - A flag followed by another flag or nothing is boolean (True)
        - Quoted strings are treated as single args
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        # Unclosed quote: fall back to whitespace split
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    command = tokens[0].lower()
    args: List[str] = []
    flags: Dict[str, Union[str, bool]] = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if token.startswith("--") and "=" in token:
            name, value = token[2:].split("=", 1)
            name = name.lower()
            flags[FLAG_SYNONYMS.get(name, name)] = value
            i += 1
            continue

        name = _flag_name(token)
        if name is None:
            args.append(token)
            i += 1
            continue

        if i + 1 < len(tokens) and _flag_name(tokens[i + 1]) is None:
            flags[name] = tokens[i + 1]
            i += 2
        else:
            flags[name] = True
            i += 1

    return ParseResult(command=command, args=args, flags=flags, raw_input=input_str)
