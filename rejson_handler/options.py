"""ReJSON command names, option flags and constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


CLIENT_INACTIVE = "inactive"
ROOT_PATH = "."
POP_ARR_LAST = -1


class CommandName(StrEnum):
    """Wire names of the ReJSON commands."""

    SET = "JSON.SET"
    GET = "JSON.GET"
    MGET = "JSON.MGET"
    DEL = "JSON.DEL"
    TYPE = "JSON.TYPE"
    NUMINCRBY = "JSON.NUMINCRBY"
    NUMMULTBY = "JSON.NUMMULTBY"
    STRAPPEND = "JSON.STRAPPEND"
    STRLEN = "JSON.STRLEN"
    ARRAPPEND = "JSON.ARRAPPEND"
    ARRLEN = "JSON.ARRLEN"
    ARRPOP = "JSON.ARRPOP"
    ARRINDEX = "JSON.ARRINDEX"
    ARRTRIM = "JSON.ARRTRIM"
    ARRINSERT = "JSON.ARRINSERT"
    OBJKEYS = "JSON.OBJKEYS"
    OBJLEN = "JSON.OBJLEN"
    DEBUG = "JSON.DEBUG"
    FORGET = "JSON.FORGET"
    RESP = "JSON.RESP"


class SetOption(StrEnum):
    """Conditional flags for ``JSON.SET``.

    ``NX`` only sets the path when it does not exist, ``XX`` only when it does.
    """

    NX = "NX"
    XX = "XX"


class DebugSubCommand(StrEnum):
    """Subcommands accepted by ``JSON.DEBUG``."""

    MEMORY = "MEMORY"
    HELP = "HELP"


@dataclass(frozen=True)
class GetOption:
    """A formatting flag for ``JSON.GET``.

    Parameters
    ----------
    name
        Flag name as sent on the wire, e.g. ``INDENT``.
    arg
        Flag argument, or None for flags that take none (``NOESCAPE``).
    """

    name: str
    arg: str | None = None

    INDENT: ClassVar[GetOption]
    NEWLINE: ClassVar[GetOption]
    SPACE: ClassVar[GetOption]
    NOESCAPE: ClassVar[GetOption]

    @classmethod
    def indent(cls, indentation: str) -> GetOption:
        """Return an ``INDENT`` flag using a custom indentation string."""
        return cls("INDENT", indentation)

    @classmethod
    def newline(cls, line_break: str) -> GetOption:
        """Return a ``NEWLINE`` flag using a custom line-break string."""
        return cls("NEWLINE", line_break)

    @classmethod
    def space(cls, space: str) -> GetOption:
        """Return a ``SPACE`` flag using a custom key/value separator."""
        return cls("SPACE", space)

    def args(self) -> tuple[str, ...]:
        """Return the wire tokens for this flag."""
        if self.arg is None:
            return (self.name,)
        return (self.name, self.arg)


GetOption.INDENT = GetOption("INDENT", "\t")
GetOption.NEWLINE = GetOption("NEWLINE", "\n")
GetOption.SPACE = GetOption("SPACE", " ")
GetOption.NOESCAPE = GetOption("NOESCAPE")
