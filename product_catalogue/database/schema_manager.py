# product_catalogue/database/schema_manager.py
# Creates the catalogue tables on startup.

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .base import Base
from product_catalogue.utils.logger import logger
from product_catalogue.api.errors import DatabaseError

# Registers the ORM models on Base.metadata.
import product_catalogue.domain  # noqa: F401

class SchemaManager:
    def __init__(self, engine: Engine):
        self.engine = engine
        logger.debug("SchemaManager initialized with SQLAlchemy engine.")

    def initialize_schema(self):
        try:
            logger.info("Creating database schema...")
            Base.metadata.create_all(bind=self.engine)
            tables = inspect(self.engine).get_table_names()
            logger.info(f"Tables created/verified successfully: {', '.join(sorted(tables))}")
        except SQLAlchemyError as e:
            logger.critical(f"Database schema initialization failed: {e}", exc_info=True)
            raise DatabaseError(f"Schema initialization failed: {e}") from e
