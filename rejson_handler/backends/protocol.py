"""ReJSON capability interface implemented by every backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from rejson_handler.options import DebugSubCommand, GetOption, SetOption


class ReJSON(ABC):
    """Async interface with one method per ReJSON command."""

    @abstractmethod
    async def json_set(self, key: str, path: str, obj: Any, *opts: SetOption) -> Any:
        """Set the JSON value at path in key."""

    @abstractmethod
    async def json_get(self, key: str, path: str, *opts: GetOption) -> Any:
        """Return the JSON value at path in key."""

    @abstractmethod
    async def json_mget(self, path: str, *keys: str) -> Any:
        """Return the values at path from several keys."""

    @abstractmethod
    async def json_del(self, key: str, path: str) -> Any:
        """Delete the value at path in key."""

    @abstractmethod
    async def json_type(self, key: str, path: str) -> Any:
        """Return the JSON type of the value at path."""

    @abstractmethod
    async def json_numincrby(self, key: str, path: str, number: float) -> Any:
        """Increment the number at path by number."""

    @abstractmethod
    async def json_nummultby(self, key: str, path: str, number: float) -> Any:
        """Multiply the number at path by number."""

    @abstractmethod
    async def json_strappend(self, key: str, path: str, json_string: str) -> Any:
        """Append json_string to the string at path."""

    @abstractmethod
    async def json_strlen(self, key: str, path: str) -> Any:
        """Return the length of the string at path."""

    @abstractmethod
    async def json_arrappend(self, key: str, path: str, *values: Any) -> Any:
        """Append values to the array at path."""

    @abstractmethod
    async def json_arrlen(self, key: str, path: str) -> Any:
        """Return the length of the array at path."""

    @abstractmethod
    async def json_arrpop(self, key: str, path: str, index: int) -> Any:
        """Remove and return the element at index of the array at path."""

    @abstractmethod
    async def json_arrindex(self, key: str, path: str, json_value: Any, *optional_range: int) -> Any:
        """Return the first index of json_value in the array at path, or -1."""

    @abstractmethod
    async def json_arrtrim(self, key: str, path: str, start: int, end: int) -> Any:
        """Trim the array at path to the inclusive range start..end."""

    @abstractmethod
    async def json_arrinsert(self, key: str, path: str, index: int, *values: Any) -> Any:
        """Insert values into the array at path before index."""

    @abstractmethod
    async def json_objkeys(self, key: str, path: str) -> Any:
        """Return the keys of the object at path."""

    @abstractmethod
    async def json_objlen(self, key: str, path: str) -> Any:
        """Return the number of keys of the object at path."""

    @abstractmethod
    async def json_debug(self, sub_command: DebugSubCommand, key: str, path: str) -> Any:
        """Run a ``JSON.DEBUG`` subcommand."""

    @abstractmethod
    async def json_forget(self, key: str, path: str) -> Any:
        """Alias of ``json_del``."""

    @abstractmethod
    async def json_resp(self, key: str, path: str) -> Any:
        """Return the value at path in Redis Serialization Protocol form."""
