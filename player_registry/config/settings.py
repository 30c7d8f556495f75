"""
Application settings
====================

Role
----
- Centralise the registry parameters (backing file path).
- Defaults suit a local run: the JSON file lands in the working directory.
- Values can be overridden through the environment or a `.env` file.

Integrations
------------
- `pydantic-settings` reads environment variables and `.env` automatically.
- Services import `from player_registry.config.settings import settings`.

Example `.env`
--------------
DATA_FILE="/var/opt/player-registry/data.json"
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # JSON file holding the whole roster (relative paths resolve against the cwd)
    DATA_FILE: str = "data.json"

    # - reads `.env` (UTF-8) when present
    # - ignores unknown keys
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Shared instance: `settings`
settings = Settings()
