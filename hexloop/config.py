from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Board
    rows: int = Field(default=5, ge=1)
    cols: int = Field(default=18, ge=1)

    # Loop resolution
    clear_delay_ticks: int = Field(default=50, ge=1)
    walk_cap_multiplier: int = Field(default=4, ge=1)

    # Points
    clear_board_bonus: int = 5_000
    lowest_point_value: int = 1
    point_increment: int = 1

    # Pattern generator (None = nondeterministic)
    random_seed: int | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HEXLOOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
