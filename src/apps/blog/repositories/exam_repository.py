"""Examination repository."""

from typing import Any, List

from sqlmodel import select

from src.apps.blog.models import Examination
from src.core.bases.base_repository import BaseRepository


class ExaminationRepository(BaseRepository[Examination]):
    model = Examination

    async def list_for_dropdown(self, limit: int = 20) -> List[Any]:
        """Return (id, name) rows ordered by name."""
        stmt = (
            select(Examination.id, Examination.name)
            .order_by(Examination.name)
            .limit(limit)
        )
        return await self._fetch_all(stmt, "list_for_dropdown")
