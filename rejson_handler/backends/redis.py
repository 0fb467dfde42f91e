"""ReJSON backend over redis-py connections."""

from __future__ import annotations

import json
import logging
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

from typing_extensions import override

import redis.asyncio as redis_async

from rejson_handler.commands import Command, CommandBuilder
from rejson_handler.options import CommandName

from .protocol import ReJSON


if TYPE_CHECKING:
    from collections.abc import Callable

    from rejson_handler.options import DebugSubCommand, GetOption, SetOption


logger = logging.getLogger(__name__)


class RedisReJSONBackend(ReJSON):
    """ReJSON backend issuing commands through a redis-py client.

    Works with ``redis.asyncio`` clients as well as blocking ``redis.Redis``
    and cluster clients: replies are awaited only when the client returns an
    awaitable. Replies are returned exactly as the client produces them.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        client: Any | None = None,
        json_encoder: Callable[[Any], str] = json.dumps,
    ) -> None:
        """Create a backend from URL or an injected client.

        Parameters
        ----------
        url
            Redis connection URL used when ``client`` is not provided.
        client
            Optional injected, already-configured client with an
            ``execute_command`` API. The caller keeps ownership of it.
        json_encoder
            Serializer for JSON values sent to the server.
        """
        super().__init__()
        self._url = url
        self._commands = CommandBuilder(json_encoder)
        if client is not None:
            self._client = client
            self._owns_client = False
            return

        if not url:
            msg = "either url or client is required for RedisReJSONBackend"
            raise ValueError(msg)

        self._client = redis_async.from_url(url, decode_responses=True)
        self._owns_client = True

    @property
    def client(self) -> Any:
        """The wrapped redis-py client."""
        return self._client

    async def _execute(self, command: Command, key: str | tuple[str, ...] | None) -> Any:
        logger.debug("issuing %s key=%r", command[0], key)
        reply = self._client.execute_command(*command)
        if isawaitable(reply):
            reply = await reply
        return reply

    @override
    async def json_set(self, key: str, path: str, obj: Any, *opts: SetOption) -> Any:
        return await self._execute(self._commands.set(key, path, obj, *opts), key)

    @override
    async def json_get(self, key: str, path: str, *opts: GetOption) -> Any:
        return await self._execute(self._commands.get(key, path, *opts), key)

    @override
    async def json_mget(self, path: str, *keys: str) -> Any:
        return await self._execute(self._commands.mget(path, *keys), keys)

    @override
    async def json_del(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.DEL, key, path), key)

    @override
    async def json_type(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.TYPE, key, path), key)

    @override
    async def json_numincrby(self, key: str, path: str, number: float) -> Any:
        return await self._execute(self._commands.number(CommandName.NUMINCRBY, key, path, number), key)

    @override
    async def json_nummultby(self, key: str, path: str, number: float) -> Any:
        return await self._execute(self._commands.number(CommandName.NUMMULTBY, key, path, number), key)

    @override
    async def json_strappend(self, key: str, path: str, json_string: str) -> Any:
        return await self._execute(self._commands.strappend(key, path, json_string), key)

    @override
    async def json_strlen(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.STRLEN, key, path), key)

    @override
    async def json_arrappend(self, key: str, path: str, *values: Any) -> Any:
        return await self._execute(self._commands.arrappend(key, path, *values), key)

    @override
    async def json_arrlen(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.ARRLEN, key, path), key)

    @override
    async def json_arrpop(self, key: str, path: str, index: int) -> Any:
        return await self._execute(self._commands.arrpop(key, path, index), key)

    @override
    async def json_arrindex(self, key: str, path: str, json_value: Any, *optional_range: int) -> Any:
        return await self._execute(self._commands.arrindex(key, path, json_value, *optional_range), key)

    @override
    async def json_arrtrim(self, key: str, path: str, start: int, end: int) -> Any:
        return await self._execute(self._commands.arrtrim(key, path, start, end), key)

    @override
    async def json_arrinsert(self, key: str, path: str, index: int, *values: Any) -> Any:
        return await self._execute(self._commands.arrinsert(key, path, index, *values), key)

    @override
    async def json_objkeys(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.OBJKEYS, key, path), key)

    @override
    async def json_objlen(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.OBJLEN, key, path), key)

    @override
    async def json_debug(self, sub_command: DebugSubCommand, key: str, path: str) -> Any:
        command = self._commands.debug(sub_command, key, path)
        # HELP carries no key
        return await self._execute(command, key if len(command) > 2 else None)

    @override
    async def json_forget(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.FORGET, key, path), key)

    @override
    async def json_resp(self, key: str, path: str) -> Any:
        return await self._execute(self._commands.key_path(CommandName.RESP, key, path), key)

    async def close(self) -> None:
        """Release the client when this backend created it from a URL."""
        if not self._owns_client:
            return

        close_method = getattr(self._client, "aclose", None)
        if close_method is None:
            close_method = getattr(self._client, "close", None)
        if close_method is None:
            return

        maybe_awaitable = close_method()
        if isawaitable(maybe_awaitable):
            await maybe_awaitable
