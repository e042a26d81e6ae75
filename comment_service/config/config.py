from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class MySQLConfig(BaseModel):
    host: str = "localhost"
    user: str = "root"
    passwd: str = ""
    port: int = 3306
    db: str = "comment"


class JwtConfig(BaseModel):
    secret_key: str
    algorithm: str = "HS256"
    expire_minutes: int = 60


class PaginationConfig(BaseModel):
    default_page: int = 1
    default_limit: int = 10


class Settings(BaseSettings):
    """
    기본 Configuration
    """

    mysql: MySQLConfig = MySQLConfig()
    jwt: JwtConfig
    pagination: PaginationConfig = PaginationConfig()

    # 지정하면 mysql 설정 대신 이 URL로 엔진을 생성 (ex - 테스트용 sqlite)
    database_url: str | None = None
    sql_echo: bool = False

    model_config = SettingsConfigDict(
        env_file="comment_service/config/.env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings():
    return Settings()


settings: Settings = get_settings()
