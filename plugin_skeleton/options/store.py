from __future__ import annotations
import copy
from typing import Any, Dict, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from plugin_skeleton.db.models import Option


class OptionsStore(Protocol):
    async def get(self, name: str) -> Optional[Dict[str, Any]]:
        ...

    async def update(self, name: str, value: Dict[str, Any]) -> None:
        ...

    async def add(self, name: str, value: Dict[str, Any]) -> bool:
        """Store `value` only if `name` is not stored yet. True when it was added."""
        ...


class SqlOptionsStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find(self, name: str) -> Option | None:
        res = await self.session.execute(select(Option).where(Option.name == name))
        return res.scalar_one_or_none()

    async def get(self, name: str) -> Optional[Dict[str, Any]]:
        row = await self._find(name)
        return None if row is None else dict(row.value or {})

    async def update(self, name: str, value: Dict[str, Any]) -> None:
        row = await self._find(name)
        if row is None:
            self.session.add(Option(name=name, value=dict(value)))
        else:
            # reassign: in-place changes to a JSON column are not tracked
            row.value = dict(value)
        await self.session.commit()

    async def add(self, name: str, value: Dict[str, Any]) -> bool:
        if await self._find(name) is not None:
            return False
        self.session.add(Option(name=name, value=dict(value)))
        try:
            await self.session.commit()
        except IntegrityError:
            # another worker inserted the same name between our read and commit
            await self.session.rollback()
            return False
        return True


class InMemoryOptionsStore:
    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(initial or {})

    async def get(self, name: str) -> Optional[Dict[str, Any]]:
        value = self._data.get(name)
        return None if value is None else dict(value)

    async def update(self, name: str, value: Dict[str, Any]) -> None:
        self._data[name] = dict(value)

    async def add(self, name: str, value: Dict[str, Any]) -> bool:
        if name in self._data:
            return False
        self._data[name] = dict(value)
        return True
