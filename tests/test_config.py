"""Tests for configuration settings."""

from sqlalchemy.engine import make_url

from app.config import Settings


def build_settings(**overrides):
    values = {"DATABASE_URL": "", "DB_HOST": "db.internal", "DB_PORT": 5432, "DB_NAME": "directory"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestDatabaseURL:
    """Connection URL assembly from the DB_* settings."""

    def test_override_wins(self):
        settings = build_settings(DATABASE_URL="sqlite://")
        assert settings.sqlalchemy_url == "sqlite://"

    def test_postgres_url(self):
        url = make_url(build_settings(DB_USER="directory", DB_PASSWORD="secret").sqlalchemy_url)

        assert url.drivername == "postgresql+psycopg2"
        assert url.host == "db.internal"
        assert url.port == 5432
        assert url.database == "directory"
        assert url.query["sslmode"] == "disable"

    def test_reserved_characters_in_credentials(self):
        url = make_url(build_settings(DB_USER="ops:admin", DB_PASSWORD="p@ss/word#1").sqlalchemy_url)

        assert url.username == "ops:admin"
        assert url.password == "p@ss/word#1"
        assert url.host == "db.internal"
        assert url.database == "directory"

    def test_sqlite_driver(self):
        settings = build_settings(DB_DRIVER="sqlite")
        assert settings.sqlalchemy_url == "sqlite:///directory.db"
