# product_catalogue/api/__init__.py
# Initializes the API layer and registers blueprints.
# Route modules are imported inside register_blueprints() so that importing
# product_catalogue.api.errors never pulls in services and repositories.

from flask import Flask

from product_catalogue.utils.logger import logger

def register_blueprints(app: Flask):
    """
    Registers all defined blueprints with the Flask application.

    Args:
        app: The Flask application instance.
    """
    from .routes.categories import categories_bp
    from .routes.products import products_bp

    blueprints = [
        (categories_bp, '/api/categories'),
        (products_bp, '/api/products'),
    ]

    logger.info("Registering API blueprints...")
    for bp, prefix in blueprints:
        app.register_blueprint(bp, url_prefix=prefix)
        logger.debug(f"Blueprint '{bp.name}' registered with prefix '{prefix}'.")
    logger.info("All API blueprints registered.")

__all__ = ["register_blueprints"]
