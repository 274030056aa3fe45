import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    log_level: str = "INFO"

    # Server (python -m src.api)
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # Months the schedule may run past the planned term before giving up
    safety_months: int = 600


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the CLI and the server entry point."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
