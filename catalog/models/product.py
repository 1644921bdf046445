"""Product model.

A catalog item filed under a subcategory. The subcategory reference does
not cascade: a subcategory that still has products cannot be removed.
"""

from sqlalchemy import CheckConstraint, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.storage.database import Base


class Product(Base):
    """Catalog product with its base price."""

    __tablename__ = "products"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    subcategory_id: Mapped[int] = mapped_column(ForeignKey("subcategories.id"), index=True)
    price: Mapped[float] = mapped_column()
    image_ref: Mapped[str | None] = mapped_column(Text)  # e.g. "test_tv"

    def __repr__(self) -> str:
        return f"<Product {self.id} {self.name!r} {self.price}>"
