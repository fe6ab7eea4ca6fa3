# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

# Output schema: "hash-algorithm" (CIP-136 reference shape) or "subject"
_SCHEMA_PROFILE = os.getenv("SCHEMA_PROFILE", "hash-algorithm")

_OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(Path.home())))
_OUTPUT_FILENAME = os.getenv("OUTPUT_FILENAME", "cip136_metadata.json")
_LOGS_DIR = Path(os.getenv("LOGS_DIR", str(_PROJECT_ROOT / "logs")))
_LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "CIP-136 Rationale Wizard"
    APP_TITLE: str = "Constitutional Committee Rationale Metadata"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "CIP-136 Tools"

    # Schema / output
    SCHEMA_PROFILE: str = _SCHEMA_PROFILE
    OUTPUT_DIR: Path = _OUTPUT_DIR
    OUTPUT_FILENAME: str = _OUTPUT_FILENAME
    JSON_INDENT: int = 2

    # Wizard rules
    TOTAL_STEPS: int = 6
    SUMMARY_MAX_LENGTH: int = 300
    DEFAULT_HASH_ALGORITHM: str = "blake2b-256"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = _LOGS_DIR

    # Logging
    LOG_TO_FILE: bool = _LOG_TO_FILE
    LOG_FILE: str = "app.log"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 860
    WINDOW_MIN_HEIGHT: int = 640

    # Colors
    PRIMARY_COLOR: str = "#0033AD"  # Cardano blue
    TEXT_COLOR: str = "#2C3E50"
    TEXT_LIGHT: str = "#5D6D7E"
    BACKGROUND_COLOR: str = "#F8F9FA"
    BORDER_COLOR: str = "#DEE2E6"
    ERROR_COLOR: str = "#E74C3C"
