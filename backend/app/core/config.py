from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./promotions.db"

    # Permissions
    ADMIN_ROLE: str = "admin"

    # Localized messages
    INVALID_IMAGE_MESSAGE: str = "Imagen inválida."

    # Logging / HTTP
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="allow"
    )


settings = Settings()
