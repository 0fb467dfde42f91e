"""Backend contracts and implementations."""

from .protocol import ReJSON
from .redis import RedisReJSONBackend


__all__ = ["ReJSON", "RedisReJSONBackend"]
