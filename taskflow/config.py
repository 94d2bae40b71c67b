# taskflow/config.py

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


DEFAULT_DATABASE_URL = "sqlite:///./data/taskflow.db"
DEFAULT_SECRET_KEY = "dev-secret-change-in-production"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """
    Runtime configuration for the server.
    Every field can be overridden through the environment or a .env file.
    """
    database_url: str = DEFAULT_DATABASE_URL
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    host: str = "0.0.0.0"
    port: int = 5000
    hide_foreign_tasks: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            secret_key=os.getenv("JWT_SECRET_KEY", DEFAULT_SECRET_KEY),
            algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            hide_foreign_tasks=_env_bool("HIDE_FOREIGN_TASKS", False),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
