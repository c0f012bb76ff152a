# product_catalogue/utils/__init__.py
# Makes 'utils' a package. Exports utility functions/classes.

from .logger import logger, configure_logger

__all__ = [
    "logger",
    "configure_logger",
]
