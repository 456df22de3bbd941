"""Examination service."""

from typing import Dict, List, Union

from src.apps.blog.models import Examination
from src.apps.blog.repositories.exam_repository import ExaminationRepository
from src.core.bases.base_service import BaseService


class ExaminationService(BaseService[Examination]):
    repository: ExaminationRepository

    def __init__(self, repository: ExaminationRepository):
        super().__init__(repository)

    async def get_dropdown_options(self, limit: int = 20) -> List[Dict[str, Union[int, str]]]:
        """Exam choices for the contact form; empty when the query fails."""
        rows = await self._safe(
            self.repository.list_for_dropdown(limit=limit), [], "fetch exams"
        )
        return [{"id": row[0], "name": row[1]} for row in rows]
