from functools import lru_cache
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field


ENV_FILE_PATH = Path(".env")


class Settings(BaseModel):
    env: str = Field(default="dev", alias="ENV")
    timezone: str = Field(default="UTC", alias="TIMEZONE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    database_url: str = Field(default="", alias="DATABASE_URL")
    postgres_db: str = Field(default="gym_management", alias="POSTGRES_DB")
    postgres_user: str = Field(default="gym", alias="POSTGRES_USER")
    postgres_password: str = Field(default="gym", alias="POSTGRES_PASSWORD")
    postgres_host: str = Field(default="localhost", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")

    jwt_secret: str = Field(default="secret", alias="JWT_SECRET")
    jwt_expire_min: int = Field(default=1440, alias="JWT_EXPIRE_MIN")
    jwt_remember_expire_min: int = Field(default=43200, alias="JWT_REMEMBER_EXPIRE_MIN")

    default_admin_name: str = Field(default="Administrator", alias="DEFAULT_ADMIN_NAME")
    default_admin_email: str = Field(default="admin@gym.local", alias="DEFAULT_ADMIN_EMAIL")
    default_admin_password: str = Field(default="admin123", alias="DEFAULT_ADMIN_PASSWORD")
    default_member_password: str = Field(default="member123", alias="DEFAULT_MEMBER_PASSWORD")

    student_discount_percent: float = Field(default=10, alias="STUDENT_DISCOUNT_PERCENT")
    membership_expiry_interval_min: int = Field(default=60, alias="MEMBERSHIP_EXPIRY_INTERVAL_MIN")

    frontend_dir: str = Field(default="", alias="FRONTEND_DIR")

    class Config:
        populate_by_name = True

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(dotenv_path=ENV_FILE_PATH, override=False)
    return Settings(**os.environ)
