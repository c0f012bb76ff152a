# product_catalogue/domain/product.py
# ORM model for catalogue products.

from decimal import Decimal
from typing import Optional, Dict, Any
from sqlalchemy import Integer, Text, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from product_catalogue.database.base import Base
from .category import Category

class Product(Base):
    """
    A sellable item. Always belongs to exactly one persisted Category.
    """
    __tablename__ = 'products'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2))
    stock_quantity: Mapped[Optional[int]] = mapped_column(Integer)
    image_url: Mapped[Optional[str]] = mapped_column(Text)
    category_id: Mapped[int] = mapped_column(ForeignKey('categories.id'), nullable=False, index=True)

    # Joined so the category stays readable after the session is closed.
    category: Mapped[Category] = relationship(Category, lazy="joined")

    def to_dict(self) -> Dict[str, Any]:
        """Converts the Product object (with its category) to a dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': float(self.price) if self.price is not None else None,
            'stock_quantity': self.stock_quantity,
            'image_url': self.image_url,
            'category': self.category.to_dict() if self.category else None,
        }

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', category_id={self.category_id})>"
