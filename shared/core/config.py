import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", 1440))  # 24 hours default

    DB_USER: str | None = os.getenv("DB_USER")
    DB_PASS: str | None = os.getenv("DB_PASS")
    DB_HOST: str | None = os.getenv("DB_HOST", "localhost")
    DB_PORT: str | None = os.getenv("DB_PORT", "5432")
    AUTH_DB_NAME: str | None = os.getenv("AUTH_DB_NAME", "hotel_auth")
    HOTEL_DB_NAME: str | None = os.getenv("HOTEL_DB_NAME", "hotel")

    # Full URLs win over the DB_* parts (sqlite for local runs)
    AUTH_DATABASE_URL: str | None = os.getenv("AUTH_DATABASE_URL")
    HOTEL_DATABASE_URL: str | None = os.getenv("HOTEL_DATABASE_URL")

    # Gallery uploads
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", os.path.join(BASE_DIR, "uploads"))
    UPLOAD_BASE_URL: str = os.getenv("UPLOAD_BASE_URL", "/uploads")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        "http://localhost:8080",
        "http://localhost:5173",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def _postgres_url(db_name: str) -> str:
    return (
        f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASS}@{settings.DB_HOST}:{settings.DB_PORT}/{db_name}"
    )


AUTH_DATABASE_URL = settings.AUTH_DATABASE_URL or _postgres_url(settings.AUTH_DB_NAME)

HOTEL_DATABASE_URL = settings.HOTEL_DATABASE_URL or _postgres_url(settings.HOTEL_DB_NAME)
