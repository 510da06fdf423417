"""Configuration for Dragons & Crystals."""

import os
from dataclasses import dataclass
from pathlib import Path


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Config:
    """Game configuration."""

    room_count: int | None = None
    seed: int | None = None
    dark_room_chance: int = 20
    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        room_count = _int_env("CRYSTALS_ROOM_COUNT", cls.room_count)
        if room_count is not None and room_count <= 0:
            raise ValueError(
                f"CRYSTALS_ROOM_COUNT must be a positive integer, got {room_count}"
            )
        log_file = os.getenv("CRYSTALS_LOG_FILE")

        return cls(
            room_count=room_count,
            seed=_int_env("CRYSTALS_SEED", cls.seed),
            dark_room_chance=_int_env(
                "CRYSTALS_DARK_ROOM_CHANCE", cls.dark_room_chance
            ),
            log_level=os.getenv("CRYSTALS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("CRYSTALS_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
