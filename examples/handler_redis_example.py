"""Minimal example for Handler using a Redis server with the ReJSON module."""

import asyncio

import redis.asyncio as redis_async

from rejson_handler import POP_ARR_LAST, GetOption, Handler, NoClientAttachedError, SetOption


async def main() -> None:
    """Run a short document set/get/mutate flow against Redis Stack."""
    handler = Handler()
    try:
        await handler.json_get("user", ".")
    except NoClientAttachedError as error:
        print("before attach:", error)

    conn = redis_async.from_url("redis://redis:6379/0", decode_responses=True)
    handler.set_redis_client(conn)
    try:
        print(await handler.json_set("user", ".", {"name": "alice", "tags": ["a", "b"], "age": 30}))
        print(await handler.json_set("user", ".name", "bob", SetOption.NX))
        print(await handler.json_get("user", ".", GetOption.INDENT, GetOption.NEWLINE))
        print(await handler.json_numincrby("user", ".age", 1))
        print(await handler.json_arrappend("user", ".tags", "c"))
        print(await handler.json_arrpop("user", ".tags", POP_ARR_LAST))
        print(await handler.json_objkeys("user", "."))
    finally:
        handler.set_client_inactive()
        await conn.aclose()


if __name__ == "__main__":
    asyncio.run(main())
