# product_catalogue/database/category_repository.py
# Handles database operations for Categories using SQLAlchemy ORM.

from typing import List, Optional
from sqlalchemy import select, exists
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .base_repository import BaseRepository
from product_catalogue.domain.category import Category
from product_catalogue.utils.logger import logger
from product_catalogue.api.errors import DatabaseError, ConflictError

class CategoryRepository(BaseRepository):
    """
    Repository for Category records.
    Every method expects the caller's Session; commit is handled externally.
    """

    def find_by_id(self, db: Session, category_id: int) -> Optional[Category]:
        """Finds a category by its ID."""
        logger.debug(f"ORM: Finding category by ID {category_id}")
        try:
            category = db.get(Category, category_id)
            if category:
                logger.debug(f"ORM: Category found by ID {category_id}.")
            else:
                logger.debug(f"ORM: Category not found by ID {category_id}.")
            return category
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error finding category by ID {category_id}: {e}", exc_info=True)
            raise DatabaseError(f"Database error finding category by ID: {e}") from e

    def find_by_name(self, db: Session, name: str) -> Optional[Category]:
        """Finds a category by its exact (case-sensitive) name."""
        logger.debug(f"ORM: Finding category by name '{name}'")
        try:
            stmt = select(Category).where(Category.name == name)
            category = db.scalars(stmt).first()
            if category:
                logger.debug(f"ORM: Category found by name '{name}': ID {category.id}")
            else:
                logger.debug(f"ORM: Category not found by name '{name}'.")
            return category
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error finding category by name '{name}': {e}", exc_info=True)
            raise DatabaseError(f"Database error finding category by name: {e}") from e

    def find_all(self, db: Session) -> List[Category]:
        """Retrieves all categories."""
        logger.debug("ORM: Retrieving all categories")
        try:
            categories = db.scalars(select(Category).order_by(Category.id)).all()
            logger.debug(f"ORM: Retrieved {len(categories)} categories.")
            return list(categories)
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error retrieving all categories: {e}", exc_info=True)
            raise DatabaseError(f"Database error retrieving all categories: {e}") from e

    def exists_by_id(self, db: Session, category_id: int) -> bool:
        """Checks whether a category with the given ID exists."""
        try:
            found = bool(db.scalar(select(exists().where(Category.id == category_id))))
            logger.debug(f"ORM: Category ID {category_id} exists: {found}")
            return found
        except SQLAlchemyError as e:
            logger.error(f"ORM: Database error checking category ID {category_id}: {e}", exc_info=True)
            raise DatabaseError(f"Database error checking category existence: {e}") from e

    def save(self, db: Session, category: Category) -> Category:
        """
        Inserts the category when it has no ID, otherwise writes its state over
        the stored row. Flushes so the generated ID is available.

        Raises:
            ConflictError: The unique constraint on the name was violated.
            DatabaseError: Any other database failure.
        """
        name = category.name
        logger.debug(f"ORM: Saving category '{name}' (ID: {category.id})")
        try:
            if category.id is None:
                db.add(category)
            else:
                category = db.merge(category)
            db.flush()
            logger.info(f"ORM: Category saved in session (ID: {category.id}, name: '{category.name}'). Commit pending.")
            return category
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"ORM: Integrity error saving category '{name}': {e.orig}")
            raise ConflictError(f"Category '{name}' violates a database constraint (name must be unique).") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"ORM: Database error saving category '{name}': {e}", exc_info=True)
            raise DatabaseError(f"Failed to save category: {e}") from e

    def delete_by_id(self, db: Session, category_id: int) -> bool:
        """
        Deletes a category by its ID. Returns False when no such category exists.

        Raises:
            ConflictError: Products still reference the category.
        """
        logger.debug(f"ORM: Deleting category ID {category_id}")
        try:
            category = db.get(Category, category_id)
            if not category:
                logger.warning(f"ORM: Attempted to delete category ID {category_id}, but it was not found.")
                return False
            db.delete(category)
            db.flush()
            logger.info(f"ORM: Category ID {category_id} marked for deletion. Commit pending.")
            return True
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"ORM: Category ID {category_id} is still referenced: {e.orig}")
            raise ConflictError(f"Category {category_id} is still referenced by products.") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"ORM: Database error deleting category ID {category_id}: {e}", exc_info=True)
            raise DatabaseError(f"Failed to delete category: {e}") from e
