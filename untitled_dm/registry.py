# untitled-dm — session launcher menu — MIT Licensed
"""
Builds the ordered list of menu choices and the index -> `Command` map.

Commands come from two sources, merged in a fixed order:

1. extra commands given on the command line as `NAME=PROGRAM ARG...` strings,
   occupying indices `[0, E)` in the order given;
2. commands from the configuration file, occupying `[E, E + C)` in file order.

A record without a program is a label-only choice: it is listed and can be
selected, but has no entry in the map and therefore nothing to run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from untitled_dm.config import CommandConfig
from untitled_dm.exceptions import MalformedArgumentError
from untitled_dm.logger import logger
from untitled_dm.tokenizer import split_args


@dataclass(frozen=True)
class Command:
    """An external program and the arguments it is started with."""

    program: str
    args: tuple[str, ...] = ()

    @property
    def runnable(self) -> bool:
        return self.program != ""

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


def parse_extra_command(record: str) -> tuple[str, Command]:
    """Parse a `NAME=PROGRAM ARG...` record into its label and command.

    Arguments containing spaces must be double-quoted. A record without `=`
    becomes a label-only choice named by the whole record.

    Raises:
        MalformedArgumentError: If the argument tail has an unterminated quote.
    """
    name, _, remainder = record.partition("=")
    program, _, tail = remainder.partition(" ")
    try:
        args = split_args(tail)
    except MalformedArgumentError as error:
        raise MalformedArgumentError(
            f"Malformed extra command {record!r}: {error}"
        ) from error
    return name, Command(program, tuple(args))


@dataclass
class CommandRegistry:
    """Ordered menu choices and the commands bound to them."""

    choices: list[str] = field(default_factory=list)
    commands: dict[int, Command] = field(default_factory=dict)

    def add(self, name: str, command: Command) -> int:
        """Append a choice and bind its command if it has one."""
        index = len(self.choices)
        self.choices.append(name)
        if command.runnable:
            self.commands[index] = command
        else:
            logger.debug("Choice %d '%s' is label-only.", index, name)
        return index

    def get(self, index: int) -> Command | None:
        return self.commands.get(index)

    def __contains__(self, index: object) -> bool:
        return index in self.commands

    def __len__(self) -> int:
        return len(self.choices)

    @classmethod
    def build(
        cls,
        extra: Sequence[str] = (),
        configured: Iterable[CommandConfig] = (),
    ) -> CommandRegistry:
        """Merge command-line and configured commands into one registry.

        Raises:
            MalformedArgumentError: If any extra record is malformed. Nothing is
                built in that case.
        """
        registry = cls()
        for record in extra:
            name, command = parse_extra_command(record)
            registry.add(name, command)
        for entry in configured:
            registry.add(entry.name, Command(entry.command, tuple(entry.args)))
        logger.debug(
            "Built registry with %d choice(s), %d runnable.",
            len(registry.choices),
            len(registry.commands),
        )
        return registry
