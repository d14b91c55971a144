from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./marketplace.db"
    # "sql" talks to database_url; "memory" keeps everything in-process
    storage_backend: str = "sql"
    seed_demo: bool = False
    session_ttl_seconds: int = 86400  # 1 day
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_prefix": "MARKETPLACE_"}


settings = Settings()
