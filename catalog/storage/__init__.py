"""Data access for the catalog store.

- database: engine/session handle, error translation, upsert-by-id
- one repository module per entity group (categories, subcategories,
  products, stores and listings)

No filtering or presentation logic here - that belongs in services.
"""
