"""
Core settings and environment variables for Civic Issue Reporter.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "Civic Issue Reporter"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - Frontend URLs allowed to access this API (comma separated)
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5000,http://localhost:5173"

    # Record store backend: "memory" (in-process) or "firestore"
    STORAGE_BACKEND: str = "memory"

    # Firebase/Firestore (only used when STORAGE_BACKEND=firestore)
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None  # Path to service account JSON

    # AI classification
    AI_ENABLED: bool = True  # If False, issues are never classified
    OPENAI_API_KEY: Optional[str] = None  # Without a key the keyword classifier is used
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    AI_TIMEOUT_SECONDS: float = 10.0

    # Media uploads
    UPLOAD_DIR: str = "./uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024  # 10MB
    MAX_IMAGE_DIMENSION: int = 1200  # Stored images fit inside this square
    IMAGE_JPEG_QUALITY: int = 85

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
