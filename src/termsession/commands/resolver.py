"""Resolves raw input lines into command results.

Resolution never raises: unknown commands and unknown help targets come
back as one-line diagnostics for the session to print.
"""

from __future__ import annotations

import logging
from typing import Mapping

from termsession.commands.model import (
    BaselineCommand,
    CommandBehavior,
    bind,
    execute,
    render_help,
)
from termsession.commands.registry import CommandRegistry
from termsession.terminal.base import TerminalSurface

logger = logging.getLogger(__name__)


class Resolver:
    """Maps an input line to the text produced by the matching command.

    The first whitespace-separated token selects the command (exact,
    case-sensitive match); the remaining tokens are bound to its
    parameters. ``help`` is handled here and never executes anything.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        terminal: TerminalSurface,
        behaviors: Mapping[str, CommandBehavior] | None = None,
    ) -> None:
        self._registry = registry
        self._terminal = terminal
        self._behaviors = dict(behaviors) if behaviors else {}

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def resolve(self, raw_line: str) -> str:
        tokens = raw_line.split() or [""]
        definition = self._registry.lookup(tokens[0])
        if definition is None:
            logger.debug("Unknown command: %r", tokens[0])
            return f"Unknown command: {tokens[0]}"

        if definition.cmd == BaselineCommand.HELP.value:
            if len(tokens) > 1:
                definition = self._registry.lookup(tokens[1])
                if definition is None:
                    return f"Unknown help: {tokens[1]}"
            return render_help(bind(definition, []), self._registry)

        instance = bind(definition, tokens[1:])
        logger.debug("Executing %r with %d argument(s)", instance.cmd, len(tokens) - 1)
        return execute(instance, self._terminal, self._behaviors)
