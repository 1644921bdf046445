"""Product catalog controller.

Holds the product list the catalog screen renders and keeps it in sync with
the store:
- initialize(): seed gate, then a full load (once per controller)
- reload_all(): full join, replaces the list wholesale
- search(query): full join, filtered by case-insensitive name substring
- product_details(id) / price_listings(id): one-off reads for a detail screen

Ordering guarantee: each reload/search takes a sequence number when it is
called, and a load publishes only if no later call was issued meanwhile.
Overlapping searches therefore settle on the most recently *issued* query,
whatever order their database calls complete in.

Failures are logged and published on `error`; `products` keeps its
previous value.
"""

from collections.abc import Callable
import logging

from catalog.schemas import ProductWithCategoryAndSubcategory, StorePriceListing
from catalog.services.seed import SeedLoader
from catalog.services.state import MutableObservable, Observable
from catalog.settings import Settings, get_settings
from catalog.storage.database import Database
from catalog.storage.errors import StorageError
from catalog.storage.listings import ListingRepository
from catalog.storage.products import ProductRepository

logger = logging.getLogger(__name__)

ProductRows = list[ProductWithCategoryAndSubcategory]


def filter_by_name(rows: ProductRows, query: str) -> ProductRows:
    """Rows whose name contains `query`, ignoring case. An empty query keeps every row."""
    needle = query.casefold()
    return [row for row in rows if needle in row.name.casefold()]


class ProductCatalogController:
    """Catalog view-model bound to one injected `Database`."""

    def __init__(
        self,
        database: Database,
        *,
        seed_on_startup: bool = True,
        products: ProductRepository | None = None,
        listings: ListingRepository | None = None,
        seeder: SeedLoader | None = None,
    ) -> None:
        self._seed_on_startup = seed_on_startup
        self._product_repo = products or ProductRepository(database)
        self._listing_repo = listings or ListingRepository(database)
        self._seeder = seeder or SeedLoader(database)

        self._products: MutableObservable[ProductRows] = MutableObservable([])
        self._error: MutableObservable[StorageError | None] = MutableObservable(None)
        self._initialized = False
        self._issued = 0

    @classmethod
    async def create(cls, database: Database, **kwargs) -> "ProductCatalogController":
        """Construct a controller and run its one-time initialization."""
        controller = cls(database, **kwargs)
        await controller.initialize()
        return controller

    @classmethod
    async def from_settings(cls, settings: Settings | None = None) -> "ProductCatalogController":
        settings = settings or get_settings()
        database = Database.from_settings(settings)
        await database.create_tables()
        return await cls.create(database, seed_on_startup=settings.seed_on_startup)

    @property
    def products(self) -> Observable[ProductRows]:
        """Current product list (read-only for observers)."""
        return self._products

    @property
    def error(self) -> Observable[StorageError | None]:
        """Last failure of a load/search, or None once a later load succeeds."""
        return self._error

    async def initialize(self) -> None:
        """Seed an empty store, then load every product.

        A seeding failure is reported on `error` and skips the load.
        """
        if self._initialized:
            raise RuntimeError("ProductCatalogController is already initialized")
        self._initialized = True

        if self._seed_on_startup:
            try:
                await self._seeder.seed_if_empty()
            except StorageError as exc:
                logger.exception("Catalog seeding failed")
                self._error.set(exc)
                return

        await self.reload_all()

    async def reload_all(self) -> bool:
        """Replace the product list with every product in the store.

        Returns:
            True if this call's result was published.
        """
        return await self._load("reload_all", lambda rows: rows)

    async def search(self, query: str) -> bool:
        """Replace the product list with products whose name contains `query`.

        Returns:
            True if this call's result was published, False if it failed or a
            later reload/search superseded it.
        """
        return await self._load(f"search({query!r})", lambda rows: filter_by_name(rows, query))

    async def product_details(self, product_id: int) -> ProductWithCategoryAndSubcategory | None:
        """One product with its parent names, or None if the id is unknown."""
        return await self._product_repo.get_product_with_category_and_subcategory(product_id)

    async def price_listings(self, product_id: int) -> list[StorePriceListing]:
        """Store prices for one product, cheapest first."""
        return await self._listing_repo.get_sorted_listings_for_product(product_id)

    async def _load(self, action: str, transform: Callable[[ProductRows], ProductRows]) -> bool:
        self._issued += 1
        ticket = self._issued

        try:
            rows = await self._product_repo.get_all_products_with_category_and_subcategory()
        except StorageError as exc:
            logger.exception(f"{action} failed")
            if ticket == self._issued:
                self._error.set(exc)
            return False

        if ticket != self._issued:
            logger.debug(f"{action}: discarded, superseded by a later request")
            return False

        result = transform(rows)
        logger.debug(f"{action}: fetched {len(rows)} items, publishing {len(result)}")
        self._products.set(result)
        self._error.set(None)
        return True
