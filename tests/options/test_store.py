"""Tests for the option stores (SQL-backed and in-memory)."""

import asyncio

import pytest

from plugin_skeleton.db.session import build_engine, build_sessionmaker, create_tables
from plugin_skeleton.options.store import InMemoryOptionsStore, SqlOptionsStore


async def _exercise(store) -> list:
    seen = []
    seen.append(await store.get("plugin_name_general_options"))
    seen.append(await store.add("plugin_name_general_options", {"debug": False}))
    seen.append(await store.add("plugin_name_general_options", {"debug": True}))
    seen.append(await store.get("plugin_name_general_options"))
    await store.update("plugin_name_general_options", {"debug": True})
    seen.append(await store.get("plugin_name_general_options"))
    await store.update("plugin_name_input_examples", {"input_example": "x"})
    seen.append(await store.get("plugin_name_input_examples"))
    return seen


EXPECTED = [
    None,
    True,
    False,
    {"debug": False},
    {"debug": True},
    {"input_example": "x"},
]


def test_in_memory_store() -> None:
    assert asyncio.run(_exercise(InMemoryOptionsStore())) == EXPECTED


def test_in_memory_store_returns_copies() -> None:
    async def scenario():
        store = InMemoryOptionsStore({"opts": {"a": "1"}})
        value = await store.get("opts")
        value["a"] = "changed"
        return await store.get("opts")

    assert asyncio.run(scenario()) == {"a": "1"}


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'store.db'}"


def test_sql_store(database_url: str) -> None:
    async def scenario():
        engine = build_engine(database_url)
        try:
            await create_tables(engine)
            async with build_sessionmaker(engine)() as session:
                return await _exercise(SqlOptionsStore(session))
        finally:
            await engine.dispose()

    assert asyncio.run(scenario()) == EXPECTED


class _StaleReadStore(SqlOptionsStore):
    """Sees no existing row, like a worker that read before another one committed."""

    async def _find(self, name: str):
        return None


def test_sql_store_add_loses_race_without_error(database_url: str) -> None:
    async def scenario():
        engine = build_engine(database_url)
        try:
            await create_tables(engine)
            factory = build_sessionmaker(engine)
            async with factory() as first, factory() as second:
                won = await SqlOptionsStore(first).add("opts", {"debug": True})
                lost = await _StaleReadStore(second).add("opts", {"debug": False})
                # the losing session is still usable after the rollback
                stored = await SqlOptionsStore(second).get("opts")
            return won, lost, stored
        finally:
            await engine.dispose()

    assert asyncio.run(scenario()) == (True, False, {"debug": True})


def test_sql_store_persists_across_sessions(database_url: str) -> None:
    async def scenario():
        engine = build_engine(database_url)
        try:
            await create_tables(engine)
            factory = build_sessionmaker(engine)
            async with factory() as session:
                await SqlOptionsStore(session).update("opts", {"debug": True, "mode": "always"})
            async with factory() as session:
                return await SqlOptionsStore(session).get("opts")
        finally:
            await engine.dispose()

    assert asyncio.run(scenario()) == {"debug": True, "mode": "always"}
