# product_catalogue/database/product_repository.py
# Handles database operations for Products using SQLAlchemy ORM.

from typing import List, Optional
from sqlalchemy import select, exists
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .base_repository import BaseRepository
from product_catalogue.domain.category import Category
from product_catalogue.domain.product import Product
from product_catalogue.utils.logger import logger
from product_catalogue.api.errors import DatabaseError, ConflictError

class ProductRepository(BaseRepository):
    """
    Repository for Product records. Products are always loaded together with
    their category. Every method expects the caller's Session.
    """

    def _find_where(self, db: Session, description: str, *criteria) -> List[Product]:
        logger.debug(f"ORM: Finding products {description}")
        try:
            stmt = select(Product).where(*criteria).order_by(Product.id)
            products = db.scalars(stmt).all()
            logger.debug(f"ORM: Found {len(products)} products {description}.")
            return list(products)
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error finding products {description}: {e}", exc_info=True)
            raise DatabaseError(f"Database error finding products: {e}") from e

    def find_by_id(self, db: Session, product_id: int) -> Optional[Product]:
        """Finds a product by its ID."""
        logger.debug(f"ORM: Finding product by ID {product_id}")
        try:
            product = db.get(Product, product_id)
            if product:
                logger.debug(f"ORM: Product found by ID {product_id}.")
            else:
                logger.debug(f"ORM: Product not found by ID {product_id}.")
            return product
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error finding product by ID {product_id}: {e}", exc_info=True)
            raise DatabaseError(f"Database error finding product by ID: {e}") from e

    def find_all(self, db: Session) -> List[Product]:
        """Retrieves all products."""
        return self._find_where(db, "(all)")

    def find_by_category_name(self, db: Session, category_name: str) -> List[Product]:
        """Finds products whose category name matches exactly."""
        category_ids = select(Category.id).where(Category.name == category_name)
        return self._find_where(
            db, f"in category '{category_name}'",
            Product.category_id.in_(category_ids)
        )

    def find_by_name_containing_ignore_case(self, db: Session, text: str) -> List[Product]:
        """Finds products whose name contains the text, ignoring case."""
        return self._find_where(
            db, f"with name containing '{text}'",
            Product.name.icontains(text, autoescape=True)
        )

    def find_by_description_containing_ignore_case(self, db: Session, text: str) -> List[Product]:
        """Finds products whose description contains the text, ignoring case. NULL descriptions never match."""
        return self._find_where(
            db, f"with description containing '{text}'",
            Product.description.is_not(None),
            Product.description.icontains(text, autoescape=True)
        )

    def exists_by_id(self, db: Session, product_id: int) -> bool:
        """Checks whether a product with the given ID exists."""
        try:
            found = bool(db.scalar(select(exists().where(Product.id == product_id))))
            logger.debug(f"ORM: Product ID {product_id} exists: {found}")
            return found
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error checking product ID {product_id}: {e}", exc_info=True)
            raise DatabaseError(f"Database error checking product existence: {e}") from e

    def save(self, db: Session, product: Product) -> Product:
        """
        Inserts the product when it has no ID, otherwise writes its state over
        the stored row. Flushes so the generated ID is available.
        """
        if product.category is None and product.category_id is None:
            raise ValueError("Cannot save a product without a category.")

        name = product.name
        logger.debug(f"ORM: Saving product '{name}' (ID: {product.id})")
        try:
            if product.id is None:
                db.add(product)
            else:
                product = db.merge(product)
            db.flush()
            logger.info(f"ORM: Product saved in session (ID: {product.id}, category ID: {product.category_id}). Commit pending.")
            return product
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"ORM: Integrity error saving product '{name}': {e.orig}")
            raise ConflictError(f"Product '{name}' violates a database constraint.") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"ORM: Database error saving product '{name}': {e}", exc_info=True)
            raise DatabaseError(f"Failed to save product: {e}") from e

    def delete_by_id(self, db: Session, product_id: int) -> bool:
        """Deletes a product by its ID. Returns False when no such product exists."""
        logger.debug(f"ORM: Deleting product ID {product_id}")
        try:
            product = db.get(Product, product_id)
            if not product:
                logger.warning(f"ORM: Attempted to delete product ID {product_id}, but it was not found.")
                return False
            db.delete(product)
            db.flush()
            logger.info(f"ORM: Product ID {product_id} marked for deletion. Commit pending.")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"ORM: Database error deleting product ID {product_id}: {e}", exc_info=True)
            raise DatabaseError(f"Failed to delete product: {e}") from e
