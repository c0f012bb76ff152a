# product_catalogue/database/base_repository.py
# Provides a simplified base class for ORM repositories.

from sqlalchemy.engine import Engine

from product_catalogue.utils.logger import logger

class BaseRepository:
    """
    Base class for data repositories using SQLAlchemy ORM Sessions.
    Keeps a reference to the engine; every query method receives the
    Session owned by the caller (see get_db_session()).
    """

    def __init__(self, engine: Engine):
        """
        Initializes the BaseRepository.

        Args:
            engine: The SQLAlchemy Engine instance.
        """
        if not isinstance(engine, Engine):
             raise TypeError("engine must be an instance of sqlalchemy.engine.Engine")
        self.engine = engine
        logger.debug(f"{self.__class__.__name__} initialized with SQLAlchemy engine: {engine.url.render_as_string(hide_password=True)}")
