from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Todo List API"

    # Database Configuration
    database_url: str = "sqlite:///./todo.db"
    sql_echo: bool = False
    pool_pre_ping: bool = True

    # Session Configuration
    session_header: str = "x-session-id"
    session_query_param: str = "session"  # 旧版前端通过 ?session= 传递

    # Server Configuration
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
