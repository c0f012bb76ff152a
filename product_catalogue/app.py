# product_catalogue/app.py
import atexit
import sys

from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError

from product_catalogue.config import Config
from product_catalogue.api import register_blueprints
from product_catalogue.api.errors import register_error_handlers, ConfigurationError, DatabaseError
from product_catalogue.database import (
    get_db_session,
    init_sqlalchemy,
    dispose_sqlalchemy_engine,
)
from product_catalogue.utils.logger import logger, configure_logger

from product_catalogue.database.category_repository import CategoryRepository
from product_catalogue.database.product_repository import ProductRepository

from product_catalogue.services import CategoryService, ProductService

def create_app(config_object: Config) -> Flask:
    """
    Factory function to create and configure the Flask application.

    Args:
        config_object: The configuration object for the application.

    Returns:
        The configured Flask application instance.
    """
    app = Flask("Product-Catalogue")
    app.config.from_object(config_object)

    # --- Logging ---
    configure_logger(config_object.LOG_LEVEL)
    logger.info("Starting Flask application for the product catalogue.")
    logger.info(f"Debug mode: {app.config.get('APP_DEBUG')}")

    # --- CORS Configuration ---
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    logger.info("CORS configured for /api/* (all origins).")

    # --- Database Initialization (SQLAlchemy) ---
    try:
        db_uri = app.config.get('SQLALCHEMY_DATABASE_URI')
        if not db_uri:
             raise ConfigurationError("SQLALCHEMY_DATABASE_URI is not configured.")

        db_engine = init_sqlalchemy(db_uri)
        logger.info("SQLAlchemy engine and session factory initialized.")

        atexit.register(dispose_sqlalchemy_engine)
    except (DatabaseError, ConfigurationError, SQLAlchemyError) as db_init_err:
        logger.critical(f"Database initialization failed: {db_init_err}", exc_info=True)
        sys.exit(1)

    # --- Dependency Injection (Service Instantiation) ---
    logger.info("Instantiating repositories and services...")
    category_repo = CategoryRepository(db_engine)
    product_repo = ProductRepository(db_engine)

    app.config['category_repository'] = category_repo
    app.config['product_repository'] = product_repo
    app.config['category_service'] = CategoryService(category_repo)
    app.config['product_service'] = ProductService(product_repo, category_repo)
    logger.info("Services instantiated and added to the application config.")

    # --- Register Blueprints (API Routes) ---
    register_blueprints(app)

    # --- Register Error Handlers ---
    register_error_handlers(app)

    # --- Simple Health Check Endpoint ---
    @app.route('/health', methods=['GET'])
    def health_check():
        db_status = "ok"
        db_error = None
        try:
            with get_db_session() as db:
                db.connection()
        except (DatabaseError, SQLAlchemyError, RuntimeError) as e:
            logger.error(f"Database session health check failed: {e}")
            db_status = "error"
            db_error = str(e)

        return jsonify({
            "status": "ok",
            "database": db_status,
            "database_error": db_error,
        }), 200 if db_status == "ok" else 503

    logger.info("Product catalogue application configured successfully.")
    return app
