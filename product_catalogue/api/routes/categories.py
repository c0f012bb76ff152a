# product_catalogue/api/routes/categories.py
# Defines API endpoints for managing categories.

from flask import Blueprint, request, jsonify, current_app

from product_catalogue.services.category_service import CategoryService
from product_catalogue.domain.payloads import CategoryData
from product_catalogue.api.errors import NotFoundError, ValidationError, ServiceError, DatabaseError
from product_catalogue.utils.logger import logger

categories_bp = Blueprint('categories', __name__)

def _get_category_service() -> CategoryService:
    service = current_app.config.get('category_service')
    if not service:
        logger.critical("CategoryService not found in application config!")
        raise ServiceError("Category service is unavailable.", 503)
    return service

def _service_failure(action: str, e):
    logger.error(f"Service/DB error while trying to {action}: {e}", exc_info=True)
    return jsonify({"error": f"Failed to {action}: {e.message}"}), e.status_code


@categories_bp.route('', methods=['GET'])
def list_categories():
    """Lists all categories."""
    logger.info("List categories request received.")
    try:
        categories = _get_category_service().get_all_categories()
        return jsonify([c.to_dict() for c in categories]), 200
    except (ServiceError, DatabaseError) as e:
        return _service_failure("list categories", e)


@categories_bp.route('/<int:category_id>', methods=['GET'])
def get_category(category_id: int):
    """Retrieves a single category."""
    logger.info(f"Get category request for ID: {category_id}")
    try:
        category = _get_category_service().get_category_by_id(category_id)
        if category is None:
            return jsonify({"error": f"Category not found: {category_id}"}), 404
        return jsonify(category.to_dict()), 200
    except (ServiceError, DatabaseError) as e:
        return _service_failure("get category", e)


@categories_bp.route('', methods=['POST'])
def create_category():
    """Creates a category. Fails with 409 when the name is taken."""
    logger.info("Create category request received.")
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "Request must be JSON"}), 400

    try:
        category = _get_category_service().create_category(CategoryData.from_dict(data))
        return jsonify(category.to_dict()), 201
    except ValidationError as e:
        logger.warning(f"Rejected category creation: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except (ServiceError, DatabaseError) as e:
        return _service_failure("create category", e)


@categories_bp.route('/<int:category_id>', methods=['PUT'])
def update_category(category_id: int):
    """Overwrites the name and description of a category."""
    logger.info(f"Update category request for ID: {category_id}")
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "Request must be JSON"}), 400

    try:
        category = _get_category_service().update_category(category_id, CategoryData.from_dict(data))
        return jsonify(category.to_dict()), 200
    except NotFoundError as e:
        logger.warning(f"Cannot update category ID {category_id}: not found.")
        return jsonify({"error": e.message}), 404
    except ValidationError as e:
        logger.warning(f"Rejected update of category ID {category_id}: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except (ServiceError, DatabaseError) as e:
        return _service_failure("update category", e)


@categories_bp.route('/<int:category_id>', methods=['DELETE'])
def delete_category(category_id: int):
    """Deletes a category."""
    logger.info(f"Delete category request for ID: {category_id}")
    try:
        _get_category_service().delete_category(category_id)
        return '', 204
    except NotFoundError as e:
        logger.warning(f"Cannot delete category ID {category_id}: not found.")
        return jsonify({"error": e.message}), 404
    except ValidationError as e:
        logger.warning(f"Rejected deletion of category ID {category_id}: {e.message}")
        return jsonify({"error": e.message}), e.status_code
    except (ServiceError, DatabaseError) as e:
        return _service_failure("delete category", e)
