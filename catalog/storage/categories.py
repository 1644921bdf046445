"""Category repository."""

from sqlalchemy import delete, func, select

from catalog.models import Category
from catalog.storage.database import Database, upsert_by_id


class CategoryRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, category: Category) -> int:
        """Insert a category, overwriting the row with the same id if one exists."""
        async with self._db.session() as session:
            return await upsert_by_id(session, category)

    async def count(self) -> int:
        """Number of categories; 0 on an empty store."""
        async with self._db.session() as session:
            result = await session.execute(select(func.count(Category.id)))
            return result.scalar() or 0

    async def get_all(self) -> list[Category]:
        async with self._db.session() as session:
            result = await session.execute(select(Category).order_by(Category.id))
            return list(result.scalars().all())

    async def delete(self, category_id: int) -> bool:
        """Delete a category and, through ON DELETE CASCADE, its subcategories.

        Products are not cascaded, so this raises ConstraintViolation while any
        of the category's subcategories still has products.

        Returns:
            True if a category row was removed.
        """
        async with self._db.session() as session:
            result = await session.execute(delete(Category).where(Category.id == category_id))
            return result.rowcount > 0
