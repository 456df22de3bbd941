from typing import Any, Awaitable, Generic, TypeVar

from sqlmodel import SQLModel

from src.core.bases.base_repository import BaseRepository, RepositoryError
from src.core.logger import get_logger

T = TypeVar("T", bound=SQLModel)
R = TypeVar("R")


class BaseService(Generic[T]):
    """Base service wrapping a repository.

    Page services never let a storage failure break a render: `_safe`
    logs the error and hands back the caller's fallback value instead.
    """

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository
        self.logger = get_logger(self.__class__.__name__)

    async def _safe(self, query: Awaitable[R], fallback: R, operation: str) -> R:
        try:
            return await query
        except RepositoryError as e:
            self.logger.error("Could not %s: %s", operation, e)
            return fallback
