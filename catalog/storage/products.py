"""Product repository.

Besides plain inserts, serves the joined catalog projection:
Product -> Subcategory -> Category, one row per product.
"""

from sqlalchemy import Select, func, select

from catalog.models import Category, Product, Subcategory
from catalog.schemas import ProductWithCategoryAndSubcategory
from catalog.storage.database import Database, upsert_by_id


def _joined_products_query() -> Select:
    return (
        select(
            Product.id,
            Product.name,
            Product.subcategory_id,
            Product.price,
            Product.image_ref,
            Subcategory.name.label("subcategory_name"),
            Category.name.label("category_name"),
        )
        .join(Subcategory, Product.subcategory_id == Subcategory.id)
        .join(Category, Subcategory.category_id == Category.id)
    )


class ProductRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def insert(self, product: Product) -> int:
        """Insert a product; its subcategory_id must reference an existing subcategory."""
        async with self._db.session() as session:
            return await upsert_by_id(session, product)

    async def count(self) -> int:
        async with self._db.session() as session:
            result = await session.execute(select(func.count(Product.id)))
            return result.scalar() or 0

    async def get_all_products_with_category_and_subcategory(
        self,
    ) -> list[ProductWithCategoryAndSubcategory]:
        """All products annotated with their subcategory and category names.

        Returns:
            One record per product, in insertion (id) order.
        """
        async with self._db.session() as session:
            result = await session.execute(_joined_products_query().order_by(Product.id))
            return [
                ProductWithCategoryAndSubcategory.model_validate(dict(row._mapping))
                for row in result
            ]

    async def get_product_with_category_and_subcategory(
        self, product_id: int
    ) -> ProductWithCategoryAndSubcategory | None:
        async with self._db.session() as session:
            result = await session.execute(
                _joined_products_query().where(Product.id == product_id)
            )
            row = result.first()
            if row is None:
                return None
            return ProductWithCategoryAndSubcategory.model_validate(dict(row._mapping))
