"""Application configuration"""
from pydantic_settings import BaseSettings
from typing import List, Optional
from urllib.parse import quote_plus


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database Configuration (separate fields)
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "aus_cms"
    # Full SQLAlchemy URL, wins over the separate fields when set
    DATABASE_URL_OVERRIDE: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        """Construct async database URL from separate fields"""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        password = quote_plus(self.DB_PASSWORD)
        return f"postgresql+asyncpg://{self.DB_USER}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # JWT Security
    JWT_SECRET_KEY: str = "your-secret-key-change-in-production-min-32-chars"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 day
    # Reject tokens minted before the admin's last password change/reset
    TOKEN_REVOCATION_ENABLED: bool = True

    # Passwords
    BCRYPT_ROUNDS: int = 10
    PASSWORD_MIN_LENGTH: int = 8

    # Bootstrap superadmin (created on startup when both are set)
    FIRST_SUPERADMIN_EMAIL: Optional[str] = None
    FIRST_SUPERADMIN_PASSWORD: Optional[str] = None

    # Application
    PROJECT_NAME: str = "AUS CMS"
    DEBUG: bool = True
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env that aren't defined in Settings


# Global settings instance
settings = Settings()
