"""Binding, help rendering and execution of commands.

Baseline tokens are a closed set (``BaselineCommand``). Everything else
dispatches through a behavior table mapping token -> callable, which is
where new command behaviors are plugged in without touching the
resolver.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Mapping, Sequence

from termsession.commands.registry import CommandRegistry
from termsession.domain.models import CommandDefinition, CommandInstance
from termsession.terminal.base import LINE_BREAK, TerminalSurface

logger = logging.getLogger(__name__)

CommandBehavior = Callable[[CommandInstance, TerminalSurface], str]

COMMAND_COMPLETE = "Command complete."


class BaselineCommand(str, enum.Enum):
    """Tokens every registry is expected to carry."""

    HELP = "help"
    ACCOUNT = "account"
    CLEAR = "clear"


def bind(definition: CommandDefinition, argument_tokens: Sequence[str]) -> CommandInstance:
    """Copy a definition and fill its parameters positionally.

    Extra tokens are ignored; parameters without a token keep ``""``
    whether or not they are optional.
    """
    tokens = list(argument_tokens)
    params = [
        param.model_copy(update={"value": tokens[index] if index < len(tokens) else ""})
        for index, param in enumerate(definition.params)
    ]
    return CommandInstance(
        cmd=definition.cmd,
        name=definition.name,
        description=definition.description,
        params=params,
    )


def help_line(command: CommandDefinition | CommandInstance) -> str:
    return f"{command.name}, [{command.cmd}] {command.description}"


def render_help(instance: CommandInstance, registry: CommandRegistry) -> str:
    """Render help for one command, or for every command when it is ``help``."""
    if instance.cmd != BaselineCommand.HELP.value:
        return help_line(instance)
    return LINE_BREAK.join(help_line(definition) for definition in registry)


def execute(
    instance: CommandInstance,
    terminal: TerminalSurface,
    behaviors: Mapping[str, CommandBehavior] | None = None,
) -> str:
    """Run a bound command and return its text output.

    An empty string means the command ran but has nothing to print.
    ``clear`` always resets the terminal; other tokens use their entry
    in ``behaviors`` and report generic completion without one.
    """
    if instance.cmd == BaselineCommand.CLEAR.value:
        terminal.reset()
        return ""

    behavior = behaviors.get(instance.cmd) if behaviors else None
    if behavior is None:
        logger.debug("No behavior for %r, reporting completion", instance.cmd)
        return COMMAND_COMPLETE
    return behavior(instance, terminal)
