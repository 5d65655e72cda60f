"""Configuration loading and validation for atelier."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from rich.logging import RichHandler

# Get the project root directory (parent of src)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load environment variables from .env file in project root
load_dotenv(PROJECT_ROOT / ".env")


def load_config() -> dict:
    """Load configuration from environment variables."""

    # Helper function to resolve paths relative to project root
    def resolve_path(path: str | None, default: Path) -> str:
        if not path:
            return str(default)
        if Path(path).is_absolute():
            return path
        return str(PROJECT_ROOT / path)

    data_dir = Path(resolve_path(os.getenv("ATELIER_DATA_DIR"), PROJECT_ROOT / ".atelier"))

    config = {
        # Required API key
        "gemini_api_key": os.getenv("GEMINI_API_KEY"),
        # Model configurations
        "gemini_image_model": os.getenv("GEMINI_IMAGE_MODEL", "gemini-3-pro-image-preview"),
        "gemini_text_model": os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash"),
        # Local persistence
        "data_dir": str(data_dir),
        "templates_file": resolve_path(os.getenv("TEMPLATES_FILE"), data_dir / "prompt_templates.json"),
        "brand_settings_file": resolve_path(
            os.getenv("BRAND_SETTINGS_FILE"), data_dir / "brand_settings.json"
        ),
        "items_db_path": resolve_path(os.getenv("ITEMS_DB_PATH"), data_dir / "items.db"),
        # Default card logo: file path or http(s) URL
        "default_logo": os.getenv("DEFAULT_LOGO"),
        # Generation settings
        "max_concurrent_generations": int(os.getenv("MAX_CONCURRENT_GENERATIONS", "5")),
        # Server settings
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_json": os.getenv("LOG_JSON", "false").lower() == "true",
        "cors_origins": [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
            ).split(",")
            if origin.strip()
        ],
    }

    return config


def validate_config(config: dict) -> list[str]:
    """Validate configuration and return list of errors."""
    errors = []

    # Check required API key
    if not config.get("gemini_api_key"):
        errors.append("GEMINI_API_KEY is required")

    if config.get("max_concurrent_generations", 1) < 1:
        errors.append("MAX_CONCURRENT_GENERATIONS must be at least 1")

    data_dir = Path(config["data_dir"])
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        errors.append(f"Cannot create data directory: {e}")

    default_logo = config.get("default_logo")
    if default_logo and not default_logo.startswith(("http://", "https://")):
        if not Path(default_logo).exists():
            errors.append(f"DEFAULT_LOGO not found: {default_logo}")

    return errors


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration with Rich for beautiful terminal output."""
    # Clear any existing handlers
    logging.root.handlers.clear()

    # Rich handler for beautiful console output
    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # Disable markup to avoid conflicts
    )

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )

    # Suppress noisy third-party loggers
    noisy_loggers = [
        "httpx",
        "httpcore",
        "google_genai",
        "google_genai.models",
        "aiosqlite",
    ]

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_supported_image_formats() -> list[str]:
    """Return list of supported product photo extensions."""
    return [".jpg", ".jpeg", ".png", ".webp", ".heic", ".heif"]
