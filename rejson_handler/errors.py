"""Errors raised locally by the handler and command builder."""

from __future__ import annotations


class ReJSONError(Exception):
    """Base class for errors raised by rejson-handler itself."""


class NoClientAttachedError(ReJSONError):
    """An operation was invoked on a handler with no backend attached."""

    def __init__(self, msg: str = "no redis client is set") -> None:
        super().__init__(msg)


class CommandArgumentError(ReJSONError, ValueError):
    """Optional command arguments could not be turned into a ReJSON command."""
