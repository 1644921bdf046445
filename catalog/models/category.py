"""Category model.

Top level of the taxonomy (Electronics, Drinks, ...).
"""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.storage.database import Base


class Category(Base):
    """Catalog category."""

    __tablename__ = "categories"
    __table_args__ = (CheckConstraint("length(name) > 0", name="ck_categories_name_not_empty"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name!r}>"
