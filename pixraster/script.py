"""Parsing script text into statements and running them against a render context."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .commands import CommandError
from .context import RenderContext
from .dictionary import CommandDictionary, default_dictionary

logger = logging.getLogger(__name__)

_PARAM_DELIMITERS = " ,()"


def tokenize(text: str, delimiters: str) -> list[str]:
    """Split ``text`` line by line at any of the ``delimiters`` characters.

    Empty tokens are dropped; no token spans a line break.
    """
    tokens: list[str] = []
    if delimiters:
        splitter = re.compile("[" + "".join(re.escape(c) for c in delimiters) + "]")
    else:
        splitter = None
    for line in text.split("\n"):
        parts = splitter.split(line) if splitter is not None else [line]
        tokens.extend(part for part in parts if part)
    return tokens


@dataclass(frozen=True)
class Statement:
    """One script line: a command keyword and its parameters."""

    command: str
    params: tuple[str, ...] = ()


class ScriptParser:
    """Holds the statements of the last parsed script and runs them."""

    def __init__(self, dictionary: Optional[CommandDictionary] = None) -> None:
        self.dictionary = dictionary if dictionary is not None else default_dictionary()
        self.statements: list[Statement] = []

    def parse(self, script: str) -> list[Statement]:
        """Replace the held statements with those of ``script`` and return them.

        Lines starting with ``//`` and lines without tokens are skipped.
        """
        statements: list[Statement] = []
        for line in tokenize(script, "\n"):
            if line.startswith("//"):
                continue
            tokens = tokenize(line, _PARAM_DELIMITERS)
            if not tokens:
                continue
            keyword, *params = tokens
            statements.append(Statement(keyword, tuple(params)))
        self.statements = statements
        return list(statements)

    def execute(self, context: RenderContext) -> list[str]:
        """Run every statement in order.

        Unknown commands and commands that fail are logged and skipped; the
        messages are returned in the order they occurred.
        """
        errors: list[str] = []
        for statement in self.statements:
            command = self.dictionary.lookup(statement.command)
            if command is None:
                message = f"Unknown command: {statement.command}"
                logger.warning(message)
                errors.append(message)
                continue
            try:
                command.execute(context, statement.params)
            except CommandError as exc:
                message = f"Failed to run command: {statement.command} ({exc})"
                logger.warning(message)
                errors.append(message)
        return errors