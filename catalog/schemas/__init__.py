"""Pydantic schemas for query projections."""

from catalog.schemas.catalog import ProductWithCategoryAndSubcategory, StorePriceListing

__all__ = [
    "ProductWithCategoryAndSubcategory",
    "StorePriceListing",
]
