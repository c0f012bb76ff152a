# product_catalogue/services/product_service.py
# Business logic for managing catalogue products.

from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from product_catalogue.database import get_db_session
from product_catalogue.database.category_repository import CategoryRepository
from product_catalogue.database.product_repository import ProductRepository
from product_catalogue.domain.category import Category
from product_catalogue.domain.product import Product
from product_catalogue.domain.payloads import ProductData
from product_catalogue.utils.logger import logger
from product_catalogue.api.errors import NotFoundError, ValidationError, ServiceError, DatabaseError

class ProductService:
    """
    Service layer for product management, including resolution of the
    category a product belongs to.
    """

    def __init__(self, product_repository: ProductRepository, category_repository: CategoryRepository):
        self.product_repository = product_repository
        self.category_repository = category_repository
        logger.info("ProductService initialized (ORM).")

    def _require_category(self, db: Session, category_id: int) -> Category:
        category = self.category_repository.find_by_id(db, category_id)
        if not category:
            logger.warning(f"Category ID {category_id} referenced by product does not exist.")
            raise NotFoundError(f"Category not found with ID: {category_id}")
        return category

    def _resolve_category(self, db: Session, data: ProductData) -> Category:
        """
        Picks the category for a new product: by ID if given (must exist), else
        by name (created when missing), else the payload is rejected.
        """
        if data.category_id is not None:
            return self._require_category(db, data.category_id)

        if data.category_name is not None:
            category = self.category_repository.find_by_name(db, data.category_name)
            if category:
                return category
            logger.info(f"Category '{data.category_name}' not found, creating it for the new product.")
            return self.category_repository.save(db, Category(name=data.category_name, description=None))

        raise ValidationError("Product must be associated with a category (ID or Name).")

    def get_all_products(self) -> List[Product]:
        """Returns every product."""
        logger.debug("Fetching all products.")
        try:
            with get_db_session() as db:
                products = self.product_repository.find_all(db)
            logger.debug(f"Found {len(products)} products.")
            return products
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to retrieve products: {e}", exc_info=True)
            raise ServiceError(f"Could not retrieve products: {e}") from e

    def get_products_by_category(self, category_name: str) -> List[Product]:
        """Returns the products whose category name matches exactly."""
        logger.debug(f"Fetching products for category '{category_name}'.")
        try:
            with get_db_session() as db:
                return self.product_repository.find_by_category_name(db, category_name)
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to retrieve products for category '{category_name}': {e}", exc_info=True)
            raise ServiceError(f"Could not retrieve products by category: {e}") from e

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        """Returns the product with the given ID, or None when it does not exist."""
        logger.debug(f"Fetching product ID {product_id}.")
        try:
            with get_db_session() as db:
                return self.product_repository.find_by_id(db, product_id)
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to retrieve product ID {product_id}: {e}", exc_info=True)
            raise ServiceError(f"Could not retrieve product: {e}") from e

    def create_product(self, data: ProductData) -> Product:
        """
        Creates a product attached to an existing or newly created category.

        Raises:
            NotFoundError: A category ID was given but does not exist.
            ValidationError: Neither a category ID nor a category name was given.
        """
        logger.info(f"Creating product '{data.name}'.")
        try:
            with get_db_session() as db:
                category = self._resolve_category(db, data)
                product = Product(
                    name=data.name,
                    description=data.description,
                    price=data.price,
                    stock_quantity=data.stock_quantity,
                    image_url=data.image_url,
                    category=category,
                )
                created = self.product_repository.save(db, product)
            logger.info(f"Product '{created.name}' created with ID {created.id} in category ID {created.category_id}.")
            return created
        except (NotFoundError, ValidationError):
            raise
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to create product '{data.name}': {e}", exc_info=True)
            raise ServiceError(f"Could not create product: {e}") from e

    def update_product(self, product_id: int, data: ProductData) -> Product:
        """
        Overwrites name, description, price, stock quantity and image URL.
        The category is replaced only when the payload carries a category ID;
        a category name is ignored here.

        Raises:
            NotFoundError: The product, or the referenced category, does not exist.
        """
        logger.info(f"Updating product ID {product_id}.")
        try:
            with get_db_session() as db:
                product = self.product_repository.find_by_id(db, product_id)
                if not product:
                    logger.warning(f"Update failed: product ID {product_id} not found.")
                    raise NotFoundError(f"Product not found for update: {product_id}")

                product.name = data.name
                product.description = data.description
                product.price = data.price
                product.stock_quantity = data.stock_quantity
                product.image_url = data.image_url
                if data.category_id is not None:
                    product.category = self._require_category(db, data.category_id)

                updated = self.product_repository.save(db, product)
            logger.info(f"Product ID {product_id} updated.")
            return updated
        except (NotFoundError, ValidationError):
            raise
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to update product ID {product_id}: {e}", exc_info=True)
            raise ServiceError(f"Could not update product: {e}") from e

    def delete_product(self, product_id: int) -> None:
        """
        Deletes a product.

        Raises:
            NotFoundError: No product has the given ID.
        """
        logger.info(f"Deleting product ID {product_id}.")
        try:
            with get_db_session() as db:
                if not self.product_repository.exists_by_id(db, product_id):
                    logger.warning(f"Delete failed: product ID {product_id} not found.")
                    raise NotFoundError(f"Product not found: {product_id}")
                self.product_repository.delete_by_id(db, product_id)
            logger.info(f"Product ID {product_id} deleted.")
        except (NotFoundError, ValidationError):
            raise
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to delete product ID {product_id}: {e}", exc_info=True)
            raise ServiceError(f"Could not delete product: {e}") from e

    def search_products(self, keyword: str) -> List[Product]:
        """
        Case-insensitive substring search over name and description.
        Scans every product in memory.
        """
        if keyword is None:
            raise ValidationError("Search keyword is required.")

        needle = keyword.lower()
        products = self.get_all_products()
        matches = [
            p for p in products
            if needle in p.name.lower()
            or (p.description is not None and needle in p.description.lower())
        ]
        logger.debug(f"Search '{keyword}' matched {len(matches)} of {len(products)} products.")
        return matches
