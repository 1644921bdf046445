"""Tests for the default taxonomy seed loader."""

import pytest

from catalog.models import Category
from catalog.services.seed import SAMPLE_LISTINGS, STORES, TAXONOMY, SeedLoader
from catalog.storage.categories import CategoryRepository
from catalog.storage.database import Database
from catalog.storage.errors import ConstraintViolation
from catalog.storage.listings import ListingRepository, StoreRepository
from catalog.storage.products import ProductRepository
from catalog.storage.subcategories import SubcategoryRepository

EXPECTED_CATEGORIES = len(TAXONOMY)
EXPECTED_SUBCATEGORIES = sum(len(subs) for subs in TAXONOMY.values())
EXPECTED_PRODUCTS = sum(len(p) for subs in TAXONOMY.values() for p in subs.values())


async def _counts(database: Database) -> tuple[int, int, int]:
    return (
        await CategoryRepository(database).count(),
        await SubcategoryRepository(database).count(),
        await ProductRepository(database).count(),
    )


def test_taxonomy_shape():
    assert EXPECTED_CATEGORIES == 7
    assert EXPECTED_SUBCATEGORIES == 19
    assert EXPECTED_PRODUCTS == 19


@pytest.mark.asyncio
async def test_seed_populates_empty_store(database: Database):
    assert await SeedLoader(database).seed_if_empty() is True

    assert await _counts(database) == (EXPECTED_CATEGORIES, EXPECTED_SUBCATEGORIES, EXPECTED_PRODUCTS)
    assert len(await StoreRepository(database).get_all()) == len(STORES)


@pytest.mark.asyncio
@pytest.mark.parametrize("runs", [2, 5])
async def test_seed_is_idempotent(database: Database, runs: int):
    loader = SeedLoader(database)
    results = [await loader.seed_if_empty() for _ in range(runs)]

    assert results == [True] + [False] * (runs - 1)
    assert await _counts(database) == (EXPECTED_CATEGORIES, EXPECTED_SUBCATEGORIES, EXPECTED_PRODUCTS)


@pytest.mark.asyncio
async def test_seed_leaves_non_empty_store_alone(database: Database):
    await CategoryRepository(database).insert(Category(name="My Things"))

    assert await SeedLoader(database).seed_if_empty() is False
    assert await _counts(database) == (1, 0, 0)


@pytest.mark.asyncio
async def test_seeded_products_sit_under_their_true_parents(database: Database):
    await SeedLoader(database).seed_if_empty()

    rows = await ProductRepository(database).get_all_products_with_category_and_subcategory()
    by_name = {r.name: r for r in rows}

    assert len(rows) == EXPECTED_PRODUCTS
    assert (by_name["Brookside Milk"].subcategory_name, by_name["Brookside Milk"].category_name) == ("Milk", "Drinks")
    assert by_name["EXE 2kgs All-purpose Flour"].subcategory_name == "Wheat"
    assert by_name["Apples"].category_name == "Organic"
    assert by_name['Samsung 55" TV'].image_ref == "test_tv"
    assert rows[0].name == 'Samsung 55" TV'


@pytest.mark.asyncio
async def test_seeded_fridge_listings_are_cheapest_first(database: Database):
    await SeedLoader(database).seed_if_empty()
    rows = await ProductRepository(database).get_all_products_with_category_and_subcategory()
    fridge_id = next(r.id for r in rows if r.name == "Samsung Fridge")

    listings = await ListingRepository(database).get_sorted_listings_for_product(fridge_id)

    assert [(l.store_name, l.price) for l in listings] == [
        ("CityStore", 57999),
        ("SkySoko", 58500),
        ("Hotpoint", 60000),
    ]
    assert len(listings) == len(SAMPLE_LISTINGS["Samsung Fridge"])
    assert all(l.website_url.startswith("https://") for l in listings)


@pytest.mark.asyncio
async def test_only_the_fridge_has_seeded_listings(database: Database):
    await SeedLoader(database).seed_if_empty()
    rows = await ProductRepository(database).get_all_products_with_category_and_subcategory()
    listing_repo = ListingRepository(database)

    priced = [r.name for r in rows if await listing_repo.get_sorted_listings_for_product(r.id)]

    assert priced == ["Samsung Fridge"]
    assert list(SAMPLE_LISTINGS) == ["Samsung Fridge"]


@pytest.mark.asyncio
async def test_failing_insert_aborts_remaining_steps(database: Database, monkeypatch: pytest.MonkeyPatch):
    loader = SeedLoader(database)

    async def reject_product(product):
        raise ConstraintViolation("FOREIGN KEY constraint failed")

    monkeypatch.setattr(loader.products, "insert", reject_product)

    with pytest.raises(ConstraintViolation):
        await loader.seed_if_empty()

    # No transaction wraps the seed: earlier steps stay, later ones never run.
    assert await _counts(database) == (EXPECTED_CATEGORIES, EXPECTED_SUBCATEGORIES, 0)
    assert await StoreRepository(database).get_all() == []
    # The gate now sees a non-empty store and will not repair it.
    assert await loader.seed_if_empty() is False
