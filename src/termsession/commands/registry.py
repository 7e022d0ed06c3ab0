"""Command registry and its YAML loader.

The registry is an immutable token -> definition table, built once at
startup and passed by reference to the resolver. ``load_registry``
starts from the baseline command set and optionally extends it from a
commands file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator

import yaml
from pydantic import ValidationError

from termsession.domain.models import CommandDefinition, Parameter

logger = logging.getLogger(__name__)


BASELINE_COMMANDS: tuple[CommandDefinition, ...] = (
    CommandDefinition(
        cmd="help",
        name="Help",
        description="Shows help message for commands.",
        params=(
            Parameter(
                name="command",
                description="Command to look up.",
                optional=True,
            ),
        ),
    ),
    CommandDefinition(
        cmd="account",
        name="Account",
        description="Shows account information.",
    ),
    CommandDefinition(
        cmd="clear",
        name="Clear",
        description="Clears the terminal screen.",
    ),
)


class CommandRegistry:
    """Read-only table of command definitions keyed by token.

    Iteration yields definitions in the order they were given.
    """

    def __init__(self, definitions: Iterable[CommandDefinition]) -> None:
        table: dict[str, CommandDefinition] = {}
        for definition in definitions:
            if definition.cmd in table:
                raise RegistryError(f"Duplicate command token: {definition.cmd}")
            table[definition.cmd] = definition
        self._table = MappingProxyType(table)

    def lookup(self, token: str) -> CommandDefinition | None:
        return self._table.get(token)

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._table)

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, token: object) -> bool:
        return token in self._table

    def __repr__(self) -> str:
        return f"CommandRegistry({', '.join(self._table)})"


def default_registry() -> CommandRegistry:
    """Build a registry holding only the baseline commands."""
    return CommandRegistry(BASELINE_COMMANDS)


def load_registry(commands_file: Path | str | None = None) -> CommandRegistry:
    """Build the baseline registry, extended from a YAML commands file.

    The file holds a ``commands`` list of ``{cmd, name, description,
    params}`` mappings. An entry reusing a baseline token replaces that
    definition in place; new tokens are appended in file order.

    Raises:
        RegistryError: If the file is missing or holds invalid entries.
    """
    if commands_file is None:
        return default_registry()

    path = Path(commands_file)
    extra = _read_commands_file(path)

    merged: dict[str, CommandDefinition] = {d.cmd: d for d in BASELINE_COMMANDS}
    for definition in extra:
        if definition.cmd in merged:
            logger.info("Commands file overrides built-in command %r", definition.cmd)
        merged[definition.cmd] = definition

    registry = CommandRegistry(merged.values())
    logger.info("Loaded %d commands (%d from %s)", len(registry), len(extra), path)
    return registry


def _read_commands_file(path: Path) -> list[CommandDefinition]:
    if not path.exists():
        raise RegistryError(f"Commands file {path} not found", path=path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise RegistryError(f"Malformed commands file {path}: {e}", path=path) from e

    if not isinstance(data, dict):
        raise RegistryError(f"Commands file {path} must be a mapping", path=path)
    entries = data.get("commands", [])
    if not isinstance(entries, list):
        raise RegistryError(f"'commands' in {path} must be a list", path=path)

    definitions: list[CommandDefinition] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            definition = CommandDefinition.model_validate(entry)
        except ValidationError as e:
            raise RegistryError(
                f"Invalid command #{index} in {path}: {e}", path=path
            ) from e
        if definition.cmd in seen:
            raise RegistryError(
                f"Duplicate command token {definition.cmd!r} in {path}", path=path
            )
        seen.add(definition.cmd)
        definitions.append(definition)
    return definitions


class RegistryError(Exception):
    """Raised when a command registry cannot be built."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
