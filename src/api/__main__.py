"""Run the API server: python -m src.api"""

import uvicorn

from src.config import configure_logging, settings


def main() -> None:
    configure_logging()
    uvicorn.run("src.api.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
