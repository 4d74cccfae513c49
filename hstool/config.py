from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "hstool"
    debug: bool = False

    # Level name for the hstool logger (DEBUG, INFO, WARNING, ...)
    log_level: str = "INFO"

    # Longest deckstring the HTTP surface will attempt to decode.
    # Real deck codes are a few hundred characters.
    max_deckstring_length: int = 4096


settings = Settings()
