# resume_generator/__main__.py
# Run with:  python -m resume_generator   (serves until the process is stopped)
import uvicorn

from resume_generator.config import get_settings
from resume_generator.observability import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "resume_generator.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
