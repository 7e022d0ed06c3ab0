"""Command registry, command model and line resolver."""

from termsession.commands.model import (
    COMMAND_COMPLETE,
    BaselineCommand,
    CommandBehavior,
    bind,
    execute,
    render_help,
)
from termsession.commands.registry import (
    BASELINE_COMMANDS,
    CommandRegistry,
    RegistryError,
    default_registry,
    load_registry,
)
from termsession.commands.resolver import Resolver

__all__ = [
    "BASELINE_COMMANDS",
    "COMMAND_COMPLETE",
    "BaselineCommand",
    "CommandBehavior",
    "CommandRegistry",
    "RegistryError",
    "Resolver",
    "bind",
    "default_registry",
    "execute",
    "load_registry",
    "render_help",
]
