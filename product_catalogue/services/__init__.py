# product_catalogue/services/__init__.py
# Makes 'services' a package. Exports service classes.

from .category_service import CategoryService
from .product_service import ProductService

__all__ = [
    "CategoryService",
    "ProductService",
]
