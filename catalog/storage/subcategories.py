"""Subcategory repository."""

from sqlalchemy import func, select

from catalog.models import Subcategory
from catalog.storage.database import Database, upsert_by_id


class SubcategoryRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, subcategory: Subcategory) -> int:
        """Insert a subcategory; its category_id must reference an existing category."""
        async with self._db.session() as session:
            return await upsert_by_id(session, subcategory)

    async def count(self) -> int:
        async with self._db.session() as session:
            result = await session.execute(select(func.count(Subcategory.id)))
            return result.scalar() or 0

    async def get_by_category(self, category_id: int) -> list[Subcategory]:
        async with self._db.session() as session:
            result = await session.execute(
                select(Subcategory)
                .where(Subcategory.category_id == category_id)
                .order_by(Subcategory.id)
            )
            return list(result.scalars().all())
