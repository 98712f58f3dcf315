from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seat Segment Reservation'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables Logger.io args/return tracing
    LOG_TO_FILE: bool = False  # Production uses stdout only

    # Default train topology used by the DI container
    TOTAL_STATIONS: int = 10
    TOTAL_SEATS: int = 5
    TRACK_KIND: str = 'segment'  # 'segment' or 'interval'

    @field_validator('TOTAL_STATIONS')
    @classmethod
    def validate_total_stations(cls, v: int) -> int:
        if v < 2:
            raise ValueError('TOTAL_STATIONS must be at least 2')
        return v

    @field_validator('TOTAL_SEATS')
    @classmethod
    def validate_total_seats(cls, v: int) -> int:
        if v < 1:
            raise ValueError('TOTAL_SEATS must be at least 1')
        return v

    @field_validator('TRACK_KIND', mode='before')
    @classmethod
    def normalize_track_kind(cls, v: str) -> str:
        value = str(v).strip().lower()
        if value not in ('segment', 'interval'):
            raise ValueError(f'TRACK_KIND must be "segment" or "interval", got {v!r}')
        return value


settings = Settings()  # type: ignore
