"""rejson-handler - typed async interface to the Redis ReJSON commands"""

from ._version import version as __version__
from .backends import ReJSON, RedisReJSONBackend
from .commands import CommandBuilder
from .errors import CommandArgumentError, NoClientAttachedError, ReJSONError
from .handler import Handler, RedisClient
from .options import CLIENT_INACTIVE, POP_ARR_LAST, ROOT_PATH, DebugSubCommand, GetOption, SetOption


__all__ = [
    "CLIENT_INACTIVE",
    "POP_ARR_LAST",
    "ROOT_PATH",
    "CommandArgumentError",
    "CommandBuilder",
    "DebugSubCommand",
    "GetOption",
    "Handler",
    "NoClientAttachedError",
    "ReJSON",
    "ReJSONError",
    "RedisClient",
    "RedisReJSONBackend",
    "SetOption",
    "__version__",
]
