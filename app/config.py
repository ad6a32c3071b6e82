"""
Application Configuration Settings
Healthcare Facility Directory API
"""

from typing import List

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

# DB_DRIVER value -> SQLAlchemy dialect+driver
DRIVER_DIALECTS = {
    "postgres": "postgresql+psycopg2",
    "postgresql": "postgresql+psycopg2",
    "sqlite": "sqlite",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Application
    APP_NAME: str = "Healthcare Facility Directory"
    APP_VERSION: str = "1.0.0"
    SERVER_PORT: int = 8080
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 3002
    DB_USER: str = "user"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "mydb"
    DB_SSLMODE: str = "disable"
    DB_DRIVER: str = "postgres"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DATABASE_URL: str = ""  # Full URL override, e.g. sqlite:///./directory.db

    # Authentication
    JWT_SECRET_KEY: str = "change-this-jwt-secret-before-deploying"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24
    VERIFICATION_TOKEN_EXPIRE_MINUTES: int = 60
    PASSWORD_MIN_LENGTH: int = 8

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def sqlalchemy_url(self) -> str:
        """Connection URL assembled from the DB_* variables unless DATABASE_URL is set."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        dialect = DRIVER_DIALECTS.get(self.DB_DRIVER.lower(), self.DB_DRIVER)
        if dialect == "sqlite":
            return f"sqlite:///{self.DB_NAME}.db"

        # URL.create escapes reserved characters in the user and password
        url = URL.create(
            dialect,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
            query={"sslmode": self.DB_SSLMODE} if dialect.startswith("postgresql") else {},
        )
        return url.render_as_string(hide_password=False)


settings = Settings()
