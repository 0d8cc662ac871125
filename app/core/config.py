from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str
    # Development convenience; deployments run alembic instead
    auto_create_tables: bool = False

    # JWT (issued by GET /jwt, valid for one day)
    secret_key: str
    access_token_expire_minutes: int = 24 * 60
    algorithm: str = "HS256"

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Stripe. Leave stripe_secret_key empty to disable payment intents.
    stripe_secret_key: str = ""
    payment_currency: str = "usd"

    # Env
    env: str = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def payments_enabled(self) -> bool:
        return bool(self.stripe_secret_key)


settings = Settings()
