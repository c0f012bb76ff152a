# product_catalogue/services/category_service.py
# Business logic for managing product categories.

from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError

from product_catalogue.database import get_db_session
from product_catalogue.database.category_repository import CategoryRepository
from product_catalogue.domain.category import Category
from product_catalogue.domain.payloads import CategoryData
from product_catalogue.utils.logger import logger
from product_catalogue.api.errors import (
    NotFoundError, ValidationError, ConflictError, DuplicateKeyError, ServiceError, DatabaseError
)

class CategoryService:
    """
    Service layer for category management.

    The duplicate-name check in create_category runs in the same session as
    the insert but takes no lock; two concurrent creates of the same name are
    settled by the unique constraint on categories.name and the loser gets a
    DuplicateKeyError.
    """

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository
        logger.info("CategoryService initialized (ORM).")

    def get_all_categories(self) -> List[Category]:
        """Returns every category."""
        logger.debug("Fetching all categories.")
        try:
            with get_db_session() as db:
                categories = self.category_repository.find_all(db)
            logger.debug(f"Found {len(categories)} categories.")
            return categories
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to retrieve categories: {e}", exc_info=True)
            raise ServiceError(f"Could not retrieve categories: {e}") from e

    def get_category_by_id(self, category_id: int) -> Optional[Category]:
        """Returns the category with the given ID, or None when it does not exist."""
        logger.debug(f"Fetching category ID {category_id}.")
        try:
            with get_db_session() as db:
                return self.category_repository.find_by_id(db, category_id)
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to retrieve category ID {category_id}: {e}", exc_info=True)
            raise ServiceError(f"Could not retrieve category: {e}") from e

    def create_category(self, data: CategoryData) -> Category:
        """
        Creates a new category.

        Raises:
            DuplicateKeyError: A category with the same name already exists.
        """
        logger.info(f"Creating category '{data.name}'.")
        try:
            with get_db_session() as db:
                if self.category_repository.find_by_name(db, data.name):
                    logger.warning(f"Category '{data.name}' already exists.")
                    raise DuplicateKeyError("Category with this name already exists.")
                try:
                    created = self.category_repository.save(db, Category(name=data.name, description=data.description))
                except ConflictError as e:
                    raise DuplicateKeyError("Category with this name already exists.") from e
            logger.info(f"Category '{created.name}' created with ID {created.id}.")
            return created
        except (NotFoundError, ValidationError):
            raise
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to create category '{data.name}': {e}", exc_info=True)
            raise ServiceError(f"Could not create category: {e}") from e

    def update_category(self, category_id: int, data: CategoryData) -> Category:
        """
        Overwrites the name and description of an existing category.

        Raises:
            NotFoundError: No category has the given ID.
            ConflictError: The new name is already used by another category.
        """
        logger.info(f"Updating category ID {category_id}.")
        try:
            with get_db_session() as db:
                category = self.category_repository.find_by_id(db, category_id)
                if not category:
                    logger.warning(f"Update failed: category ID {category_id} not found.")
                    raise NotFoundError(f"Category not found: {category_id}")
                category.name = data.name
                category.description = data.description
                updated = self.category_repository.save(db, category)
            logger.info(f"Category ID {category_id} updated.")
            return updated
        except (NotFoundError, ValidationError):
            raise
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to update category ID {category_id}: {e}", exc_info=True)
            raise ServiceError(f"Could not update category: {e}") from e

    def delete_category(self, category_id: int) -> None:
        """
        Deletes a category.

        Raises:
            NotFoundError: No category has the given ID.
            ConflictError: Products still reference the category.
        """
        logger.info(f"Deleting category ID {category_id}.")
        try:
            with get_db_session() as db:
                if not self.category_repository.exists_by_id(db, category_id):
                    logger.warning(f"Delete failed: category ID {category_id} not found.")
                    raise NotFoundError(f"Category not found: {category_id}")
                self.category_repository.delete_by_id(db, category_id)
            logger.info(f"Category ID {category_id} deleted.")
        except (NotFoundError, ValidationError):
            raise
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to delete category ID {category_id}: {e}", exc_info=True)
            raise ServiceError(f"Could not delete category: {e}") from e
