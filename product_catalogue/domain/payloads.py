# product_catalogue/domain/payloads.py
# Input models for creating and updating catalogue entities.

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, Any, Optional

from product_catalogue.api.errors import ValidationError
from product_catalogue.utils.logger import logger


# numeric(12, 2) column on products.price
PRICE_SCALE = 2
PRICE_LIMIT = Decimal(10) ** (12 - PRICE_SCALE)
PRICE_STEP = Decimal("0.01")


def _optional_int(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"Field '{key}' must be an integer.")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"Field '{key}' must be an integer.")


def _optional_decimal(data: Dict[str, Any], key: str) -> Optional[Decimal]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Field '{key}' must be a number.")
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Field '{key}' must be a number.")
    if not number.is_finite():
        raise ValidationError(f"Field '{key}' must be a finite number.")
    if abs(number) >= PRICE_LIMIT:
        raise ValidationError(f"Field '{key}' must be less than {PRICE_LIMIT} in absolute value.")
    if number != number.quantize(PRICE_STEP):
        raise ValidationError(f"Field '{key}' allows at most {PRICE_SCALE} decimal places.")
    return number


def _require_name(data: Dict[str, Any], entity: str) -> str:
    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Field 'name' is required for {entity}.")
    return name


@dataclass(frozen=True)
class CategoryData:
    """Fields of a category as supplied by a caller. Immutable."""
    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CategoryData':
        """Creates a CategoryData object from a request body."""
        if not isinstance(data, dict):
            logger.error(f"Invalid data type for CategoryData.from_dict: {type(data)}")
            raise ValidationError("Invalid data format for category.")
        return cls(
            name=_require_name(data, 'category'),
            description=data.get('description'),
        )


@dataclass(frozen=True)
class ProductData:
    """
    Fields of a product as supplied by a caller. Immutable.

    The category may be referenced by id or by name. Which one is honoured
    depends on the operation: creation accepts either, update only the id.
    """
    name: str
    description: Optional[str] = None
    price: Optional[Decimal] = None
    stock_quantity: Optional[int] = None
    image_url: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductData':
        """
        Creates a ProductData object from a request body.

        The category reference is read from a nested object
        ({"category": {"id": 1}} or {"category": {"name": "Tools"}}) or from
        the flat keys 'category_id' / 'category_name'.
        """
        if not isinstance(data, dict):
            logger.error(f"Invalid data type for ProductData.from_dict: {type(data)}")
            raise ValidationError("Invalid data format for product.")

        category = data.get('category')
        if category is not None and not isinstance(category, dict):
            raise ValidationError("Field 'category' must be an object with 'id' or 'name'.")
        category = category or {}

        category_name = category.get('name', data.get('category_name'))
        if category_name is not None and not isinstance(category_name, str):
            raise ValidationError("Category name must be a string.")
        if category_name is not None and not category_name.strip():
            raise ValidationError("Category name must not be blank.")

        return cls(
            name=_require_name(data, 'product'),
            description=data.get('description'),
            price=_optional_decimal(data, 'price'),
            stock_quantity=_optional_int(data, 'stock_quantity'),
            image_url=data.get('image_url'),
            category_id=_optional_int(category, 'id') if 'id' in category else _optional_int(data, 'category_id'),
            category_name=category_name,
        )
