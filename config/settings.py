from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "storefront"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Relational store (product / customer). No default: startup aborts if unset.
    DATABASE_URL: str | None = None
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10

    # Redis cache (product / customer). Use rediss:// for in-transit TLS.
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_KEY_PREFIX: str = ""

    # AWS (order). Region falls back to the boto3 default chain when unset.
    AWS_REGION: str | None = None
    AWS_ENDPOINT_URL: str | None = None
    ORDER_TABLE_NAME: str = "order"
    S3_ACCESS_POINT_ARN: str | None = None
    EXPORT_OBJECT_KEY: str = "orders_data.json"
    EXPORT_WARN_ITEMS: int = 10_000


settings = Settings()
