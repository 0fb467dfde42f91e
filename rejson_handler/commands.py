"""Build ReJSON command argument lists."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .errors import CommandArgumentError
from .options import CommandName, DebugSubCommand, GetOption, SetOption


if TYPE_CHECKING:
    from collections.abc import Callable


Command = tuple[Any, ...]


class CommandBuilder:
    """Turn operation arguments into the exact token sequence sent to Redis.

    JSON values (documents, array elements, appended strings) are serialized
    with ``json_encoder``. Keys, paths and integers are passed through as-is.
    """

    def __init__(self, json_encoder: Callable[[Any], str] = json.dumps) -> None:
        super().__init__()
        self._json_encoder = json_encoder

    def _encode_all(self, command: CommandName, values: tuple[Any, ...]) -> list[str]:
        if not values:
            msg = f"{command} requires at least one json value"
            raise CommandArgumentError(msg)
        return [self._json_encoder(value) for value in values]

    def set(self, key: str, path: str, obj: Any, *opts: SetOption) -> Command:
        if len(opts) > 1:
            msg = f"{CommandName.SET} accepts at most one of NX/XX, got {len(opts)}"
            raise CommandArgumentError(msg)
        args: list[Any] = [CommandName.SET.value, key, path, self._json_encoder(obj)]
        for opt in opts:
            try:
                args.append(SetOption(opt).value)
            except ValueError as error:
                msg = f"unknown {CommandName.SET} option: {opt!r}"
                raise CommandArgumentError(msg) from error
        return tuple(args)

    def get(self, key: str, path: str, *opts: GetOption) -> Command:
        args: list[Any] = [CommandName.GET.value, key]
        for opt in opts:
            if not isinstance(opt, GetOption):
                msg = f"unknown {CommandName.GET} option: {opt!r}"
                raise CommandArgumentError(msg)
            args.extend(opt.args())
        args.append(path)
        return tuple(args)

    def mget(self, path: str, *keys: str) -> Command:
        return (CommandName.MGET.value, *keys, path)

    def key_path(self, command: CommandName, key: str, path: str) -> Command:
        """Build the ``JSON.<CMD> key path`` shape shared by most read commands."""
        return (CommandName(command).value, key, path)

    def number(self, command: CommandName, key: str, path: str, number: float) -> Command:
        return (CommandName(command).value, key, path, number)

    def strappend(self, key: str, path: str, json_string: str) -> Command:
        return (CommandName.STRAPPEND.value, key, path, self._json_encoder(json_string))

    def arrappend(self, key: str, path: str, *values: Any) -> Command:
        return (CommandName.ARRAPPEND.value, key, path, *self._encode_all(CommandName.ARRAPPEND, values))

    def arrpop(self, key: str, path: str, index: int) -> Command:
        return (CommandName.ARRPOP.value, key, path, index)

    def arrindex(self, key: str, path: str, json_value: Any, *optional_range: int) -> Command:
        if len(optional_range) > 2:
            msg = f"{CommandName.ARRINDEX} accepts at most start and stop, got {len(optional_range)} bounds"
            raise CommandArgumentError(msg)
        return (CommandName.ARRINDEX.value, key, path, self._json_encoder(json_value), *optional_range)

    def arrtrim(self, key: str, path: str, start: int, end: int) -> Command:
        return (CommandName.ARRTRIM.value, key, path, start, end)

    def arrinsert(self, key: str, path: str, index: int, *values: Any) -> Command:
        encoded = self._encode_all(CommandName.ARRINSERT, values)
        return (CommandName.ARRINSERT.value, key, path, index, *encoded)

    def debug(self, sub_command: DebugSubCommand | str, key: str, path: str) -> Command:
        """Build ``JSON.DEBUG``; ``HELP`` ignores key and path."""
        try:
            sub = DebugSubCommand(sub_command)
        except ValueError as error:
            msg = f"unknown {CommandName.DEBUG} subcommand: {sub_command!r}"
            raise CommandArgumentError(msg) from error
        if sub is DebugSubCommand.HELP:
            return (CommandName.DEBUG.value, sub.value)
        return (CommandName.DEBUG.value, sub.value, key, path)
