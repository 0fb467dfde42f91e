"""ReJSON handler dispatching commands to an attachable backend."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Protocol

from .backends.redis import RedisReJSONBackend
from .errors import NoClientAttachedError
from .options import CLIENT_INACTIVE


if TYPE_CHECKING:
    from collections.abc import Callable

    from .backends.protocol import ReJSON
    from .options import DebugSubCommand, GetOption, SetOption


logger = logging.getLogger(__name__)

REDIS_PY_CLIENT = "redis-py"


class RedisClient(Protocol):
    """Client selection API: attach a backend or detach it."""

    def set_client_inactive(self) -> None: ...

    def set_redis_client(self, conn: Any, *, json_encoder: Callable[[Any], str] = json.dumps) -> None: ...


class Handler:
    """Dispatch ReJSON operations to the attached backend.

    A new handler is inactive: every operation raises
    :class:`~rejson_handler.errors.NoClientAttachedError` until a backend is
    attached with :meth:`set_redis_client` or :meth:`set_backend`. Arguments
    are forwarded verbatim, and results and errors come back unchanged.

    Each operation reads the backend once when called, so attaching or
    detaching while calls are in flight does not affect those calls. Attach
    and detach are otherwise unsynchronized; configure the handler before
    sharing it.
    """

    def __init__(self) -> None:
        super().__init__()
        self._client_name = CLIENT_INACTIVE
        self._implementation: ReJSON | None = None

    @property
    def client_name(self) -> str:
        """Name tag of the attached backend, or ``CLIENT_INACTIVE``."""
        return self._client_name

    @property
    def is_active(self) -> bool:
        """True while a backend is attached."""
        return self._implementation is not None

    def set_client_inactive(self) -> None:
        """Detach the current backend, if any."""
        logger.debug("detaching ReJSON backend %s", self._client_name)
        self._client_name, self._implementation = CLIENT_INACTIVE, None

    def set_redis_client(self, conn: Any, *, json_encoder: Callable[[Any], str] = json.dumps) -> None:
        """Attach a redis-py connection (sync, asyncio or cluster client)."""
        self.set_backend(RedisReJSONBackend(client=conn, json_encoder=json_encoder), REDIS_PY_CLIENT)

    def set_backend(self, backend: ReJSON, name: str) -> None:
        """Attach any ReJSON implementation under a name tag."""
        if name == CLIENT_INACTIVE:
            msg = f"backend name must not be {CLIENT_INACTIVE!r}"
            raise ValueError(msg)
        logger.debug("attaching ReJSON backend %s", name)
        self._client_name, self._implementation = name, backend

    def _backend(self) -> ReJSON:
        implementation = self._implementation
        if implementation is None:
            raise NoClientAttachedError
        return implementation

    async def json_set(self, key: str, path: str, obj: Any, *opts: SetOption) -> Any:
        """Set a JSON value.

        ReJSON syntax::

            JSON.SET <key> <path> <json> [NX | XX]
        """
        return await self._backend().json_set(key, path, obj, *opts)

    async def json_get(self, key: str, path: str, *opts: GetOption) -> Any:
        """Get a JSON value.

        ReJSON syntax::

            JSON.GET <key>
                     [INDENT indentation-string]
                     [NEWLINE line-break-string]
                     [SPACE space-string]
                     [NOESCAPE]
                     [path ...]
        """
        return await self._backend().json_get(key, path, *opts)

    async def json_mget(self, path: str, *keys: str) -> Any:
        """Get the value at path from multiple keys.

        ReJSON syntax::

            JSON.MGET <key> [key ...] <path>
        """
        return await self._backend().json_mget(path, *keys)

    async def json_del(self, key: str, path: str) -> Any:
        """``JSON.DEL <key> <path>``"""
        return await self._backend().json_del(key, path)

    async def json_type(self, key: str, path: str) -> Any:
        """``JSON.TYPE <key> [path]``"""
        return await self._backend().json_type(key, path)

    async def json_numincrby(self, key: str, path: str, number: float) -> Any:
        """``JSON.NUMINCRBY <key> <path> <number>``"""
        return await self._backend().json_numincrby(key, path, number)

    async def json_nummultby(self, key: str, path: str, number: float) -> Any:
        """``JSON.NUMMULTBY <key> <path> <number>``"""
        return await self._backend().json_nummultby(key, path, number)

    async def json_strappend(self, key: str, path: str, json_string: str) -> Any:
        """``JSON.STRAPPEND <key> [path] <json-string>``"""
        return await self._backend().json_strappend(key, path, json_string)

    async def json_strlen(self, key: str, path: str) -> Any:
        """``JSON.STRLEN <key> [path]``"""
        return await self._backend().json_strlen(key, path)

    async def json_arrappend(self, key: str, path: str, *values: Any) -> Any:
        """``JSON.ARRAPPEND <key> <path> <json> [json ...]``"""
        return await self._backend().json_arrappend(key, path, *values)

    async def json_arrlen(self, key: str, path: str) -> Any:
        """``JSON.ARRLEN <key> [path]``"""
        return await self._backend().json_arrlen(key, path)

    async def json_arrpop(self, key: str, path: str, index: int) -> Any:
        """Remove and return the element at index; use ``POP_ARR_LAST`` for the last one.

        ReJSON syntax::

            JSON.ARRPOP <key> [path [index]]
        """
        return await self._backend().json_arrpop(key, path, index)

    async def json_arrindex(self, key: str, path: str, json_value: Any, *optional_range: int) -> Any:
        """Return the index of json_value in the array, or -1 when absent.

        ReJSON syntax::

            JSON.ARRINDEX <key> <path> <json-scalar> [start [stop]]
        """
        return await self._backend().json_arrindex(key, path, json_value, *optional_range)

    async def json_arrtrim(self, key: str, path: str, start: int, end: int) -> Any:
        """``JSON.ARRTRIM <key> <path> <start> <stop>``"""
        return await self._backend().json_arrtrim(key, path, start, end)

    async def json_arrinsert(self, key: str, path: str, index: int, *values: Any) -> Any:
        """Insert values before index, shifting later elements right.

        ReJSON syntax::

            JSON.ARRINSERT <key> <path> <index> <json> [json ...]
        """
        return await self._backend().json_arrinsert(key, path, index, *values)

    async def json_objkeys(self, key: str, path: str) -> Any:
        """``JSON.OBJKEYS <key> [path]``"""
        return await self._backend().json_objkeys(key, path)

    async def json_objlen(self, key: str, path: str) -> Any:
        """``JSON.OBJLEN <key> [path]``"""
        return await self._backend().json_objlen(key, path)

    async def json_debug(self, sub_command: DebugSubCommand, key: str, path: str) -> Any:
        """Report debugging information.

        ReJSON syntax::

            JSON.DEBUG MEMORY <key> [path]   memory usage of a value in bytes
            JSON.DEBUG HELP                  help message
        """
        return await self._backend().json_debug(sub_command, key, path)

    async def json_forget(self, key: str, path: str) -> Any:
        """Alias of :meth:`json_del`. ``JSON.FORGET <key> [path]``"""
        return await self._backend().json_forget(key, path)

    async def json_resp(self, key: str, path: str) -> Any:
        """Return the value in Redis Serialization Protocol form. ``JSON.RESP <key> [path]``"""
        return await self._backend().json_resp(key, path)
