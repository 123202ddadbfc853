"""
Application configuration settings.
"""
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List
import os


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - PostgreSQL for production, SQLite for local
    DATABASE_URL: str = ""  # PostgreSQL connection string (production)
    DATABASE_PATH: str = "data/portal.db"  # SQLite path (local fallback)
    USE_POSTGRES: bool = False  # Set to True to use PostgreSQL

    # Blob storage for uploaded documents
    STORAGE_DIR: str = "data/storage"
    STORAGE_BUCKET: str = "documents"
    PUBLIC_STORAGE_URL: str = "/storage"

    # Upload constraints
    MAX_UPLOAD_SIZE_MB: int = 10
    ACCEPTED_FILE_TYPES: List[str] = [".pdf", ".jpg", ".jpeg", ".png", ".doc", ".docx"]

    # Reports
    ATTENDANCE_REPORT_LIMIT: int = 1000

    # API settings
    API_V1_PREFIX: str = "/api"
    PROJECT_NAME: str = "Beneficiary Care Portal"
    VERSION: str = "1.0.0"

    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8080",
    ]

    @property
    def database_url(self) -> str:
        """Get database URL - PostgreSQL if configured, else SQLite."""
        if self.USE_POSTGRES and self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATABASE_PATH}"

    @property
    def is_postgres(self) -> bool:
        """Check if using PostgreSQL."""
        return self.USE_POSTGRES and bool(self.DATABASE_URL)

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def bucket_dir(self) -> Path:
        """Directory holding the documents bucket."""
        return Path(self.STORAGE_DIR) / self.STORAGE_BUCKET

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()


# Ensure directories exist
def ensure_directories():
    """Create necessary directories if they don't exist."""
    dirs = [
        os.path.dirname(settings.DATABASE_PATH) or ".",
        str(settings.bucket_dir),
    ]
    for dir_path in dirs:
        os.makedirs(dir_path, exist_ok=True)
