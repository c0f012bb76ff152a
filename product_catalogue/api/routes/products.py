# product_catalogue/api/routes/products.py
# Defines API endpoints for managing and searching products.

from flask import Blueprint, request, jsonify, current_app

from product_catalogue.services.product_service import ProductService
from product_catalogue.domain.payloads import ProductData
from product_catalogue.api.errors import NotFoundError, ValidationError, ServiceError, DatabaseError
from product_catalogue.utils.logger import logger

# --- Get Service Instances ---
def _get_product_service() -> ProductService:
    service = current_app.config.get('product_service')
    if not service:
        logger.critical("ProductService not found in application config!")
        raise ServiceError("Product service is unavailable.", 503)
    return service

def _service_failure(action: str, e):
    logger.error(f"Service/DB error while trying to {action}: {e}", exc_info=True)
    return jsonify({"error": f"Failed to {action}: {e.message}"}), e.status_code

# --- Blueprint Definition ---
products_bp = Blueprint('products', __name__)

# --- Routes ---

@products_bp.route('', methods=['GET'])
def list_products():
    """Lists all products."""
    logger.info("List products request received.")
    try:
        products = _get_product_service().get_all_products()
        return jsonify([p.to_dict() for p in products]), 200
    except (ServiceError, DatabaseError) as e:
        return _service_failure("list products", e)


@products_bp.route('/<int:product_id>', methods=['GET'])
def get_product(product_id: int):
    """Retrieves a single product."""
    logger.info(f"Get product request for ID: {product_id}")
    try:
        product = _get_product_service().get_product_by_id(product_id)
        if product is None:
            return jsonify({"error": f"Product not found: {product_id}"}), 404
        return jsonify(product.to_dict()), 200
    except (ServiceError, DatabaseError) as e:
        return _service_failure("get product", e)


@products_bp.route('/category/<string:category_name>', methods=['GET'])
def list_products_by_category(category_name: str):
    """Lists the products of a category, matched by exact name."""
    logger.info(f"List products request for category: {category_name}")
    try:
        products = _get_product_service().get_products_by_category(category_name)
        return jsonify([p.to_dict() for p in products]), 200
    except (ServiceError, DatabaseError) as e:
        return _service_failure("list products by category", e)


@products_bp.route('/search', methods=['GET'])
def search_products():
    """Searches products by keyword in name or description (?keyword=...)."""
    keyword = request.args.get('keyword')
    logger.info(f"Search products request: keyword={keyword!r}")
    if keyword is None:
        return jsonify({"error": "Query parameter 'keyword' is required"}), 400

    try:
        products = _get_product_service().search_products(keyword)
        return jsonify([p.to_dict() for p in products]), 200
    except ValidationError as e:
        return jsonify({"error": e.message}), e.status_code
    except (ServiceError, DatabaseError) as e:
        return _service_failure("search products", e)


@products_bp.route('', methods=['POST'])
def create_product():
    """
    Creates a product. The category is referenced by ID or by name; an
    unknown name creates the category.
    """
    logger.info("Create product request received.")
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "Request must be JSON"}), 400

    try:
        product = _get_product_service().create_product(ProductData.from_dict(data))
        return jsonify(product.to_dict()), 201
    except NotFoundError as e:
        logger.warning(f"Cannot create product: {e.message}")
        return jsonify({"error": e.message}), 404
    except ValidationError as e:
        logger.warning(f"Rejected product creation: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except (ServiceError, DatabaseError) as e:
        return _service_failure("create product", e)


@products_bp.route('/<int:product_id>', methods=['PUT'])
def update_product(product_id: int):
    """Overwrites a product. Only a category ID can move it to another category."""
    logger.info(f"Update product request for ID: {product_id}")
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "Request must be JSON"}), 400

    try:
        product = _get_product_service().update_product(product_id, ProductData.from_dict(data))
        return jsonify(product.to_dict()), 200
    except NotFoundError as e:
        logger.warning(f"Cannot update product ID {product_id}: {e.message}")
        return jsonify({"error": e.message}), 404
    except ValidationError as e:
        logger.warning(f"Rejected update of product ID {product_id}: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except (ServiceError, DatabaseError) as e:
        return _service_failure("update product", e)


@products_bp.route('/<int:product_id>', methods=['DELETE'])
def delete_product(product_id: int):
    """Deletes a product."""
    logger.info(f"Delete product request for ID: {product_id}")
    try:
        _get_product_service().delete_product(product_id)
        return '', 204
    except NotFoundError as e:
        logger.warning(f"Cannot delete product ID {product_id}: not found.")
        return jsonify({"error": e.message}), 404
    except (ServiceError, DatabaseError) as e:
        return _service_failure("delete product", e)
