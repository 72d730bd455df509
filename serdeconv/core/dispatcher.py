import argparse
import functools
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO, BinaryIO

from serdeconv.core.converter import Converter
from serdeconv.core.ports.render import Renderer


@dataclass
class CommandContext:
    """
    Everything a command handler needs, wired once by the bootstrap layer.
    """
    converter: Converter
    pretty_converter: Converter
    renderer: Renderer
    namespace: argparse.Namespace
    stdin: BinaryIO | None = None
    stdout: TextIO | None = None

    @property
    def in_stream(self) -> BinaryIO:
        return self.stdin if self.stdin is not None else sys.stdin.buffer

    @property
    def out_stream(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout


class CommandHandler(Protocol):
    def __call__(self, ctx: CommandContext) -> str | None:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[str, CommandHandler] = {}

    @property
    def commands(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def dispatch(self, name: str, ctx: CommandContext) -> str | None:
        command = self._commands.get(name)
        if command is None:
            raise RuntimeError(f"Unknown '{name}' Command")
        return command(ctx)

    def command(self, name: str):
        def decorator(func: CommandHandler):

            @functools.wraps(func)
            def wrapper(ctx: CommandContext) -> str | None:
                return func(ctx)

            self._commands[name] = wrapper

            return wrapper

        return decorator
