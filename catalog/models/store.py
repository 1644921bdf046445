"""Store model.

A retailer whose prices are compared on the product details screen.
"""

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.storage.database import Base


class Store(Base):
    """Retail store."""

    __tablename__ = "stores"
    __table_args__ = (CheckConstraint("length(name) > 0", name="ck_stores_name_not_empty"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    website_url: Mapped[str] = mapped_column(Text, default="")

    def __repr__(self) -> str:
        return f"<Store {self.id} {self.name!r}>"
