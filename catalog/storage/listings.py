"""Store and product listing repositories.

The price comparison query lives here: listings joined to their store,
cheapest first.
"""

from sqlalchemy import select

from catalog.models import ProductListing, Store
from catalog.schemas import StorePriceListing
from catalog.storage.database import Database, upsert_by_id


class StoreRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, store: Store) -> int:
        async with self._db.session() as session:
            return await upsert_by_id(session, store)

    async def get_all(self) -> list[Store]:
        async with self._db.session() as session:
            result = await session.execute(select(Store).order_by(Store.id))
            return list(result.scalars().all())


class ListingRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, listing: ProductListing) -> int:
        """Insert a listing; both product_id and store_id must exist."""
        async with self._db.session() as session:
            return await upsert_by_id(session, listing)

    async def get_sorted_listings_for_product(self, product_id: int) -> list[StorePriceListing]:
        """Store prices for a product.

        Ordering:
        1. price ASC (cheapest first)
        2. listing id ASC (equal prices keep insertion order)
        """
        query = (
            select(
                ProductListing.price,
                Store.name.label("store_name"),
                Store.website_url,
            )
            .join(Store, ProductListing.store_id == Store.id)
            .where(ProductListing.product_id == product_id)
            .order_by(ProductListing.price.asc(), ProductListing.id.asc())
        )
        async with self._db.session() as session:
            result = await session.execute(query)
            return [StorePriceListing.model_validate(dict(row._mapping)) for row in result]
