"""Product listing model.

One store's advertised price for one product, e.g. for a Samsung Fridge:
CityStore 57,999 and SkySoko 58,500. Nothing prevents a store from
holding several listings for the same product.
"""

from sqlalchemy import CheckConstraint, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from catalog.storage.database import Base


class ProductListing(Base):
    """Store price for a product."""

    __tablename__ = "product_listings"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_product_listings_price_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), index=True)
    store_id: Mapped[int] = mapped_column(ForeignKey("stores.id"), index=True)
    price: Mapped[float] = mapped_column()

    def __repr__(self) -> str:
        return f"<ProductListing product={self.product_id} store={self.store_id} {self.price}>"
