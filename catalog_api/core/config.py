from pydantic_settings import BaseSettings
from typing import List
import os
import json


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./catalog.db"
    log_level: str = "INFO"
    environment: str = "local"
    api_prefix: str = "/api"
    # CORS origins - can be JSON array or comma-separated string
    cors_origins: str = "*"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_schema: str = "public"

    # Create missing tables on startup (fresh databases only, not a migration)
    create_tables: bool = True

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list from a JSON array or a comma-separated string."""
        try:
            origins = json.loads(self.cors_origins)
        except (json.JSONDecodeError, ValueError):
            origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]

        return origins if isinstance(origins, list) else [origins]

    class Config:
        env_file = f"config/{os.getenv('ENV', 'local')}.env"
        case_sensitive = False


settings = Settings()
