from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RARECANDY_")

    app_name: str = "RareCandy"

    api_base_url: str = "https://api.pokemontcg.io/v2"
    user_agent: str = "RareCandy/1.0"

    # Page size used by list screens
    page_size: int = 20


settings = Settings()
