"""Shared fixtures: a fresh SQLite file database per test."""

from pathlib import Path

import pytest

from catalog.models import Category, Product, Subcategory
from catalog.storage.categories import CategoryRepository
from catalog.storage.database import Database
from catalog.storage.products import ProductRepository
from catalog.storage.subcategories import SubcategoryRepository


@pytest.fixture
async def database(tmp_path: Path):
    """Create an empty catalog database with all tables."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
async def fruit_subcategory_id(database: Database) -> int:
    """Insert Organic > Fruits and return the subcategory id."""
    category_id = await CategoryRepository(database).insert(Category(name="Organic"))
    return await SubcategoryRepository(database).insert(
        Subcategory(name="Fruits", category_id=category_id)
    )


@pytest.fixture
def add_products(database: Database):
    """Return a coroutine function inserting named products into a subcategory."""
    repo = ProductRepository(database)

    async def _add(subcategory_id: int, *names: str) -> list[int]:
        return [
            await repo.insert(Product(name=name, subcategory_id=subcategory_id, price=1.0))
            for name in names
        ]

    return _add
