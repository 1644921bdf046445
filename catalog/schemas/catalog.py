"""Read-only projections computed at query time.

Neither is persisted: both are built from joined rows.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProductWithCategoryAndSubcategory(BaseModel):
    """A product row enriched with its subcategory and category names."""

    id: int
    name: str
    subcategory_id: int = Field(alias="subcategoryId")
    price: float = Field(ge=0)
    image_ref: str | None = Field(alias="imageRef", default=None)
    subcategory_name: str = Field(alias="subcategoryName")
    category_name: str = Field(alias="categoryName")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class StorePriceListing(BaseModel):
    """One store's price for a product, as shown in the price comparison."""

    price: float = Field(ge=0)
    store_name: str = Field(alias="storeName")
    website_url: str = Field(alias="websiteUrl")

    model_config = ConfigDict(populate_by_name=True, frozen=True)
