"""
Configuration read from the environment and an optional .env file
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from database.types import date_from_string

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings"""
    results_dir: str
    reference_date: int
    log_level: str

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        Build settings from RESULTS_DIR, REFERENCE_DATE and LOG_LEVEL

        Raises:
            ValueError: If REFERENCE_DATE is not a YYYY/MM/DD date
        """
        reference = os.getenv('REFERENCE_DATE', '2023/10/01')
        try:
            reference_date = date_from_string(reference)
        except ValueError as e:
            raise ValueError(f"Invalid REFERENCE_DATE {reference!r}: {e}") from e

        return cls(
            results_dir=os.getenv('RESULTS_DIR', 'Resultados'),
            reference_date=reference_date,
            log_level=os.getenv('LOG_LEVEL', 'WARNING').upper(),
        )


_settings = None


def get_settings() -> Settings:
    """Get or create the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Override the global settings instance.

    Passing ``None`` makes the next ``get_settings`` call read the environment
    again.
    """
    global _settings
    _settings = settings
