# product_catalogue/__init__.py
# Product catalogue service: categories and products over SQLAlchemy, served with Flask.
