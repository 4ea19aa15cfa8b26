"""Configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Default data directory (project root / data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"

DEFAULT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class Config:
    """gatofit settings."""

    data_dir: Path
    gemini_api_key: str
    model: str = DEFAULT_MODEL
    advisor_timeout: float = 30.0
    advisor_language: str = "European Portuguese"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from the environment."""
        data_dir = os.getenv("GATOFIT_DATA_DIR")
        return cls(
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", ""),
            model=os.getenv("GATOFIT_MODEL", DEFAULT_MODEL),
            advisor_timeout=float(os.getenv("GATOFIT_ADVISOR_TIMEOUT", "30")),
            advisor_language=os.getenv("GATOFIT_ADVISOR_LANGUAGE", "European Portuguese"),
        )

    def validate(self) -> None:
        """Check settings that would break the advisor."""
        if self.advisor_timeout <= 0:
            raise ValueError("GATOFIT_ADVISOR_TIMEOUT must be positive")
        if not self.model:
            raise ValueError("GATOFIT_MODEL must not be empty")
