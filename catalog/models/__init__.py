"""SQLAlchemy ORM models.

Models represent database tables:
- categories: top level of the catalog taxonomy
- subcategories: second level, owned by a category (cascade on delete)
- products: items shown in the catalog, filed under a subcategory
- stores: retailers that advertise prices
- product_listings: one store's advertised price for one product
"""

from catalog.models.category import Category
from catalog.models.subcategory import Subcategory
from catalog.models.product import Product
from catalog.models.store import Store
from catalog.models.product_listing import ProductListing

__all__ = ["Category", "Subcategory", "Product", "Store", "ProductListing"]
