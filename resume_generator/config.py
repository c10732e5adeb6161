# resume_generator/config.py
import os  # lets us read environment variables (from the OS)
from functools import lru_cache  # reuse one Settings object per process
from pathlib import Path

from dotenv import load_dotenv  # loads variables from a local .env file
from pydantic import BaseModel, Field  # typed, validated settings class

load_dotenv()  # read .env and put those key=value pairs into environment variables

PACKAGE_DIR = Path(__file__).resolve().parent  # resume_generator/
PROJECT_ROOT = PACKAGE_DIR.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):  # our typed container for config values
    # where the Jinja templates live
    templates_dir: Path = Path(os.getenv("TEMPLATES_DIR", str(PACKAGE_DIR / "templates")))

    # compiled-template cache; created on startup, caching is skipped if unusable
    cache_dir: Path = Path(
        os.getenv("TEMPLATE_CACHE_DIR", str(PROJECT_ROOT / "cache" / "jinja"))
    )

    # script location reported by the web server; its directory becomes the base path
    # e.g. "/resume/index.py" serves the app under /resume
    script_name: str = os.getenv("SCRIPT_NAME", "")

    # render tracebacks on unhandled errors (development only)
    display_error_details: bool = _env_flag("DISPLAY_ERROR_DETAILS", "true")

    host: str = os.getenv("HOST", "127.0.0.1")
    # raw env string; pydantic coerces it and rejects non-numbers with ValidationError
    port: int = Field(default=os.getenv("PORT", "8000"), validate_default=True)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache  # Settings() is created once and reused
def get_settings() -> Settings:
    return Settings()
