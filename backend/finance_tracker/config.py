import json
import os
from pathlib import Path
from pydantic import BaseModel, ValidationError

# Data directory: use FINANCE_DATA_DIR env var if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/finance-tracker for local dev
_data_dir = os.environ.get("FINANCE_DATA_DIR")
DATA_DIR = Path(_data_dir) if _data_dir else Path.home() / ".config" / "finance-tracker"
SETTINGS_FILE_NAME = "settings.json"


class Settings(BaseModel):
    """Application settings."""
    data_dir: Path = DATA_DIR
    db_filename: str = "finance.db"
    log_level: str = "INFO"
    log_to_file: bool = True

    # Dashboard loads and aggregation
    transaction_list_limit: int = 100
    top_categories_limit: int = 5
    activity_days: int = 7
    activity_scale_floor: int = 100

    # Vite dev server
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.db_path}"

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"


def ensure_data_dir(data_dir: Path = DATA_DIR) -> None:
    """Ensure the data directory exists."""
    data_dir.mkdir(parents=True, exist_ok=True)


def load_settings(data_dir: Path = DATA_DIR) -> Settings:
    """
    Load settings from settings.json in the data directory.

    Missing or malformed files fall back to defaults. FINANCE_LOG_LEVEL overrides
    the stored log level. Nothing is created on disk.
    """
    settings_file = data_dir / SETTINGS_FILE_NAME
    data: dict = {}

    if settings_file.exists():
        try:
            with open(settings_file, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            data = {}

    data["data_dir"] = data_dir
    log_level = os.environ.get("FINANCE_LOG_LEVEL")
    if log_level:
        data["log_level"] = log_level.upper()

    try:
        return Settings(**data)
    except ValidationError:
        return Settings(data_dir=data_dir)

