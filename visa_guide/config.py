"""Application configuration helpers."""

from dataclasses import dataclass
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


DEFAULT_DATASET_URL = (
    "https://raw.githubusercontent.com/ilyankou/passport-index-dataset/"
    "master/passport-index-tidy-iso2.csv"
)
DEFAULT_RULES_ROOT = Path(__file__).resolve().parent / "data" / "rules"


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    dataset_url: str = DEFAULT_DATASET_URL
    rules_root: Path = DEFAULT_RULES_ROOT
    http_timeout: float = 30.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    timeout = os.getenv("VISA_HTTP_TIMEOUT")
    try:
        http_timeout = float(timeout) if timeout else 30.0
    except ValueError as exc:
        raise ValueError(
            f"VISA_HTTP_TIMEOUT must be a number of seconds, got {timeout!r}."
        ) from exc

    rules_root = os.getenv("VISA_RULES_ROOT")
    return Settings(
        dataset_url=os.getenv("VISA_DATASET_URL") or DEFAULT_DATASET_URL,
        rules_root=Path(rules_root) if rules_root else DEFAULT_RULES_ROOT,
        http_timeout=http_timeout,
    )
