from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TABSTATS_SERVER__",
        env_file=".env",
        extra="ignore",
    )

    max_upload_bytes: int = 10 * 1024 * 1024
    csv_encoding: str = "utf-8-sig"
    allowed_content_types: list[str] = ["text/csv", "application/vnd.ms-excel"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TABSTATS_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    server: ServerConfig = ServerConfig()


settings = Settings()
