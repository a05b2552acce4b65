import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass
class Settings:
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Year used by the "not in the future" check; unset means the wall clock
    reference_year: Optional[int] = _optional_int("LIBRARY_REFERENCE_YEAR")


settings = Settings()
