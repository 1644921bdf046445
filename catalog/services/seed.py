"""Seed loader for the default catalog taxonomy.

Populates, in order:
1. Categories
2. Subcategories (referencing the category ids captured in step 1)
3. Products (referencing the subcategory ids captured in step 2)
4. Sample stores and the Samsung Fridge price comparison listings
   (placeholder data, see STORES below)

Gated by the category count: anything already in the store is treated as
authoritative, so a non-empty store is never touched (no merge, no
upsert-by-name). Every insert is its own transaction; a failure aborts the
remaining steps and leaves a partially seeded store behind. Two loaders
racing on an empty store can both pass the gate.
"""

import logging

from catalog.models import Category, Product, ProductListing, Store, Subcategory
from catalog.storage.categories import CategoryRepository
from catalog.storage.database import Database
from catalog.storage.listings import ListingRepository, StoreRepository
from catalog.storage.products import ProductRepository
from catalog.storage.subcategories import SubcategoryRepository

logger = logging.getLogger(__name__)

# ============================================================
# Taxonomy: category -> subcategory -> [(product, price, image_ref)]
# ============================================================

TAXONOMY: dict[str, dict[str, list[tuple[str, float, str]]]] = {
    "Electronics": {
        "Televisions": [('Samsung 55" TV', 599.99, "test_tv")],
        "Fridges": [("Samsung Fridge", 799.99, "test_fridge")],
        "Blenders": [("Ramtons Blender", 49.99, "test_blender")],
        "Washing Machines": [("Hisense 10.5 kgs", 949.99, "test_washm")],
    },
    "Pastries": {
        "Bread": [("Festive Bread", 5.99, "test_bread")],
        "Cake": [("Chocolate Cake", 12.99, "test_cake")],
    },
    "Detergents": {
        "Laundry": [("Ultra Concentrated Laundry Soap", 30.99, "test_laundry")],
        "Dish Soap": [("Cadia dish soap", 25.99, "test_dish")],
        "Bleaching Agents": [("Concentrated Bleach", 40.99, "test_bleach")],
    },
    "Drinks": {
        "Milk": [("Brookside Milk", 15.99, "test_milk")],
        "Soda": [("Canned Soda", 15.99, "test_soda")],
        "Water": [("Water", 10.99, "test_water")],
    },
    "Beauty": {
        "Skin Care": [("Eucerin Sunscreen", 60.99, "test_skin")],
        "Make Up": [("Fenti Lipstick", 85.99, "test_makeup")],
    },
    "Organic": {
        "Fruits": [("Apples", 15.99, "test_fruit")],
        "Vegetables": [("Clustered Veggies", 13.99, "test_veggies")],
    },
    "Cereals": {
        "Rice": [("Dawaat Basmati Rice", 100.00, "test_rice")],
        "Maize": [("Pembe 2kg Maize Flour", 80.00, "test_maize")],
        "Wheat": [("EXE 2kgs All-purpose Flour", 150.00, "test_wheat")],
    },
}

# ============================================================
# Stores and sample listings (product name -> [(store, price)])
# ============================================================
# CityStore 57,999 and SkySoko 58,500 for the Samsung Fridge come from the
# original app. Hotpoint, its 60,000 price and all website URLs are sample
# placeholders for demos and tests, not real retailer data.

STORES: list[dict[str, str]] = [
    {"name": "CityStore", "website_url": "https://www.citystore.co.ke"},
    {"name": "SkySoko", "website_url": "https://www.skysoko.com"},
    {"name": "Hotpoint", "website_url": "https://www.hotpoint.co.ke"},
]

SAMPLE_LISTINGS: dict[str, list[tuple[str, float]]] = {
    "Samsung Fridge": [
        ("SkySoko", 58500),
        ("CityStore", 57999),
        ("Hotpoint", 60000),
    ],
}


class SeedLoader:
    """Inserts the fixed taxonomy exactly once per store."""

    def __init__(self, database: Database) -> None:
        self.categories = CategoryRepository(database)
        self.subcategories = SubcategoryRepository(database)
        self.products = ProductRepository(database)
        self.stores = StoreRepository(database)
        self.listings = ListingRepository(database)

    async def seed_if_empty(self) -> bool:
        """Seed the store when it holds no categories.

        Returns:
            True if the taxonomy was inserted, False if the store was left alone.

        Raises:
            ConstraintViolation, StorageUnavailable: propagated from the first
                failing insert; later steps are not attempted.
        """
        existing = await self.categories.count()
        if existing > 0:
            logger.info(f"Seed skipped: store already has {existing} categories")
            return False

        logger.info("Seeding default catalog taxonomy")
        category_ids = await self.seed_categories()
        subcategory_ids = await self.seed_subcategories(category_ids)
        product_ids = await self.seed_products(subcategory_ids)
        store_ids = await self.seed_stores()
        await self.seed_listings(product_ids, store_ids)
        logger.info(
            f"Seeded {len(category_ids)} categories, {len(subcategory_ids)} subcategories, "
            f"{len(product_ids)} products, {len(store_ids)} stores"
        )
        return True

    async def seed_categories(self) -> dict[str, int]:
        """Insert categories and return mapping of name -> id."""
        category_ids: dict[str, int] = {}
        for name in TAXONOMY:
            category_ids[name] = await self.categories.insert(Category(name=name))
        return category_ids

    async def seed_subcategories(self, category_ids: dict[str, int]) -> dict[str, int]:
        """Insert subcategories and return mapping of name -> id."""
        subcategory_ids: dict[str, int] = {}
        for category_name, subcategories in TAXONOMY.items():
            for name in subcategories:
                subcategory_ids[name] = await self.subcategories.insert(
                    Subcategory(name=name, category_id=category_ids[category_name])
                )
        return subcategory_ids

    async def seed_products(self, subcategory_ids: dict[str, int]) -> dict[str, int]:
        """Insert products and return mapping of name -> id."""
        product_ids: dict[str, int] = {}
        for subcategories in TAXONOMY.values():
            for subcategory_name, products in subcategories.items():
                for name, price, image_ref in products:
                    product_ids[name] = await self.products.insert(
                        Product(
                            name=name,
                            subcategory_id=subcategory_ids[subcategory_name],
                            price=price,
                            image_ref=image_ref,
                        )
                    )
        return product_ids

    async def seed_stores(self) -> dict[str, int]:
        """Insert stores and return mapping of name -> id."""
        store_ids: dict[str, int] = {}
        for s in STORES:
            store_ids[s["name"]] = await self.stores.insert(
                Store(name=s["name"], website_url=s["website_url"])
            )
        return store_ids

    async def seed_listings(self, product_ids: dict[str, int], store_ids: dict[str, int]) -> int:
        inserted = 0
        for product_name, listings in SAMPLE_LISTINGS.items():
            for store_name, price in listings:
                await self.listings.insert(
                    ProductListing(
                        product_id=product_ids[product_name],
                        store_id=store_ids[store_name],
                        price=price,
                    )
                )
                inserted += 1
        return inserted
