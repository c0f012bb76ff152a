# product_catalogue/domain/__init__.py
# Makes 'domain' a package. Exports the ORM models and input dataclasses.

# --- ORM Models ---
from .category import Category
from .product import Product

# --- Dataclasses (input payloads) ---
from .payloads import CategoryData, ProductData

__all__ = [
    "Category",
    "Product",
    "CategoryData",
    "ProductData",
]
