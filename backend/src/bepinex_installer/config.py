from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bepinex_installer.constants import NEXUS_GAME_ID


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BPX_",
        extra="ignore",
    )

    game_id: str = NEXUS_GAME_ID
    game_path: Path | None = None
    staging_dir: Path = Path("")
    host: str = "127.0.0.1"
    port: int = 8426
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _resolve_staging_dir(self) -> "Settings":
        if self.staging_dir == Path(""):
            base = self.game_path if self.game_path is not None else Path.cwd()
            self.staging_dir = base / "downloaded_mods"
        return self


settings = Settings()
