"""
Library configuration using environment variables.
Simple module-level settings, read once at import time.
"""
import os
from pathlib import Path

# Resolved against the working directory
LOGS_DIR = Path.cwd() / "logs"

ENV_PREFIX = "DOCX_MODEL_"


def _get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.getenv(ENV_PREFIX + key, default)


def _get_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    return _get_env(key, str(default)).lower() in ("true", "1", "yes")


def _get_int(key: str, default: int = 0) -> int:
    """Get integer environment variable."""
    try:
        return int(_get_env(key, str(default)))
    except ValueError:
        return default


# =============================================================================
# Package Information
# =============================================================================
APP_NAME = _get_env("APP_NAME", "docx-model")
APP_VERSION = _get_env("VERSION", "0.1.0")

# =============================================================================
# Logging Configuration
# =============================================================================
LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
LOG_FORMAT = _get_env("LOG_FORMAT", "text")  # json or text
LOG_FILE_ENABLED = _get_bool("LOG_FILE_ENABLED", False)
LOG_FILE_PATH = _get_env("LOG_FILE_PATH", str(LOGS_DIR / "docx_model.log"))
LOG_MAX_BYTES = _get_int("LOG_MAX_BYTES", 10 * 1024 * 1024)  # 10MB
LOG_BACKUP_COUNT = _get_int("LOG_BACKUP_COUNT", 5)


def get_config_dict() -> dict:
    """Get all configuration as dictionary (for debugging)."""
    return {
        "app_name": APP_NAME,
        "app_version": APP_VERSION,
        "log_level": LOG_LEVEL,
        "log_format": LOG_FORMAT,
        "log_file_enabled": LOG_FILE_ENABLED,
        "log_file_path": LOG_FILE_PATH,
    }
