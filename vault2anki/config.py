"""Runtime configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Converter configuration.

    Every field can be overridden with a ``VAULT2ANKI_`` prefixed
    environment variable or an entry in a local ``.env`` file.
    """

    # Note discovery (suffix match is case-sensitive)
    markdown_extensions: list[str] = [".md", ".markdown"]

    # Output
    output_path: str = "anki_cards.csv"

    # Concurrency control for note reads
    max_concurrent_reads: int = 16

    # Pygments style used for fenced code blocks
    highlight_style: str = "default"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="VAULT2ANKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
