"""Catalog browser core: taxonomy storage, seeding and the product catalog controller."""

__version__ = "0.1.0"
