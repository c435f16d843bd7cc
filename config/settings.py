"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class FilterConfig:
    """Filter schema configuration settings."""

    schemas_path: Path = field(
        default_factory=lambda: Path(
            os.getenv("FILTER_SCHEMAS_PATH", str(Path(__file__).parent / "filter_schemas.yaml"))
        )
    )


@dataclass
class AppConfig:
    """Application configuration settings."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_to_file: bool = field(
        default_factory=lambda: os.getenv("LOG_TO_FILE", "false").lower() == "true"
    )


@dataclass
class Config:
    """Main configuration container."""

    filters: FilterConfig = field(default_factory=FilterConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
