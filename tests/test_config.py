import os

from product_catalogue.config import Config


def test_explicit_database_url_wins():
    config = Config(SQLALCHEMY_DATABASE_URI="sqlite://", DB_TYPE="POSTGRES")

    assert config.SQLALCHEMY_DATABASE_URI == "sqlite://"


def test_postgres_uri_is_built_with_quoted_password(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    config = Config(
        DB_TYPE="POSTGRES", POSTGRES_HOST="db", POSTGRES_PORT=5433,
        POSTGRES_USER="catalogue", POSTGRES_PASSWORD="p@ss word", POSTGRES_DB="shop",
    )

    assert config.SQLALCHEMY_DATABASE_URI == "postgresql+psycopg://catalogue:p%40ss+word@db:5433/shop"
    assert "p%40ss+word" not in config.masked_database_uri()


def test_sqlite_uri_uses_absolute_database_path(monkeypatch, tmp_path):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    db_file = tmp_path / "data" / "catalogue.db"

    config = Config(DB_TYPE="SQLITE", DATABASE_PATH=str(db_file))

    assert config.SQLALCHEMY_DATABASE_URI == f"sqlite:///{db_file}"
    assert os.path.isdir(db_file.parent)


def test_missing_postgres_settings_leave_uri_unset(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    config = Config(DB_TYPE="POSTGRES", POSTGRES_USER="", POSTGRES_PASSWORD="", POSTGRES_DB="")

    assert config.SQLALCHEMY_DATABASE_URI is None


def test_invalid_log_level_falls_back_to_debug():
    assert Config(SQLALCHEMY_DATABASE_URI="sqlite://", LOG_LEVEL="LOUD").LOG_LEVEL == "DEBUG"
