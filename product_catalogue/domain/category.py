# product_catalogue/domain/category.py
# ORM model for product categories.

from typing import Optional, Dict, Any
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from product_catalogue.database.base import Base

class Category(Base):
    """
    A named grouping of products. The name is the business key and is unique.
    """
    __tablename__ = 'categories'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)

    def to_dict(self) -> Dict[str, Any]:
        """Converts the Category object to a dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
        }

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
