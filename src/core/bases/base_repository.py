from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    model: Type[T]

    def __init__(self, get_session: Callable[..., AsyncSession]):
        self.get_session = get_session

    def _handle_db_error(self, error: SQLAlchemyError, operation: str) -> None:
        """Handle database errors and raise appropriate exceptions."""
        if isinstance(error, IntegrityError):
            raise RepositoryError(
                f"Database integrity error during {operation}: {error}"
            ) from error
        else:
            raise RepositoryError(
                f"Database error during {operation}: {error}"
            ) from error

    def _build_select_stmt(self, options: Sequence[Any] = (), **filters) -> Any:
        """Build select statement with equality filters and loader options."""
        stmt = select(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                stmt = stmt.where(getattr(self.model, field) == value)

        if options:
            stmt = stmt.options(*options)

        return stmt

    async def _fetch_all(self, stmt: Any, operation: str) -> List[Any]:
        async with self.get_session() as db:
            try:
                result = await db.exec(stmt)
                return list(result.all())
            except SQLAlchemyError as e:
                self._handle_db_error(e, operation)
        return []

    async def _fetch_first(self, stmt: Any, operation: str) -> Optional[Any]:
        async with self.get_session() as db:
            try:
                result = await db.exec(stmt)
                return result.first()
            except SQLAlchemyError as e:
                self._handle_db_error(e, operation)
        return None

    # ----------------- READ ----------------- #
    async def get_one(self, options: Sequence[Any] = (), **filters) -> Optional[T]:
        """Get a single item matching the filters."""
        stmt = self._build_select_stmt(options=options, **filters)
        return await self._fetch_first(stmt, "get_one")

    async def count(self, **filters) -> int:
        """Count items matching optional filters."""
        stmt = self._build_select_stmt(**filters)
        count_stmt = select(func.count()).select_from(stmt.subquery())
        async with self.get_session() as db:
            try:
                result = await db.exec(count_stmt)
                return result.one()
            except SQLAlchemyError as e:
                self._handle_db_error(e, "count")
        return 0

    # ----------------- WRITE ----------------- #
    async def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> T:  # type:ignore
        """Create a new item."""
        if isinstance(obj_in, BaseModel):
            obj_in = obj_in.model_dump(exclude_unset=True)

        async with self.get_session() as db:
            try:
                obj = self.model(**obj_in)  # type: ignore
                db.add(obj)
                await db.commit()
                await db.refresh(obj)
                return obj
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "create")
