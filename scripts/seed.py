#!/usr/bin/env python3
"""Seed the catalog database with the default taxonomy.

Creates (only when the store has no categories yet):
- Categories and subcategories (Electronics > Televisions, ...)
- Products with prices and image references
- Stores and sample price listings

Usage:
    python -m scripts.seed
    DATABASE_URL=sqlite+aiosqlite:///./other.db python -m scripts.seed
"""

import asyncio
import logging
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from catalog.services.seed import SeedLoader
from catalog.settings import get_settings
from catalog.storage.categories import CategoryRepository
from catalog.storage.database import Database
from catalog.storage.products import ProductRepository
from catalog.storage.subcategories import SubcategoryRepository

load_dotenv()


async def seed_database() -> None:
    """Create tables if needed and seed the default taxonomy."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    database = Database.from_settings(settings)
    try:
        print(f"🌱 {settings.app_name} {settings.app_version}: seeding {settings.async_database_url} ...")
        await database.create_tables()

        seeded = await SeedLoader(database).seed_if_empty()
        if not seeded:
            print("  ⏭️  Store already has categories, nothing to do")

        categories = await CategoryRepository(database).count()
        subcategories = await SubcategoryRepository(database).count()
        products = await ProductRepository(database).count()
        print(f"\n✅ {categories} categories, {subcategories} subcategories, {products} products")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(seed_database())
