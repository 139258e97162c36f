from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    gemini_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout_seconds: float = 30.0

    jwt_secret: str | None = None
    jwt_algorithm: str = "HS256"

    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    @property
    def ai_configured(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def auth_configured(self) -> bool:
        return bool(self.jwt_secret)


settings = Settings()


def get_settings() -> Settings:
    return settings


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MOMENTUM_", env_file=".env", extra="ignore")

    api_url: str = "http://localhost:8000"
    api_token: str | None = None
    request_timeout_seconds: float = 60.0
    reveal_interval_seconds: float = 0.005
