# product_catalogue/database/base.py
# Declarative base shared by the catalogue ORM models.

from sqlalchemy.orm import declarative_base
from sqlalchemy import MetaData

# Naming convention for constraints so the unique key on category name and the
# product -> category foreign key get stable, predictable names on every backend.
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)

Base = declarative_base(metadata=metadata)
