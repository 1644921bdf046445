"""Subcategory model.

Second level of the taxonomy. Deleting a category deletes its
subcategories at the database level (ON DELETE CASCADE).
"""

from sqlalchemy import CheckConstraint, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.storage.database import Base


class Subcategory(Base):
    """Subcategory filed under a category."""

    __tablename__ = "subcategories"
    __table_args__ = (CheckConstraint("length(name) > 0", name="ck_subcategories_name_not_empty"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Subcategory {self.id} {self.name!r} category={self.category_id}>"
