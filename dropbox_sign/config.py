import os

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_URL = "https://api.hellosign.com/v3"


class DropboxSignSettings(BaseModel):
    api_key: str | None = None
    api_url: str = API_URL

    # Connection pool size and request timeout (seconds) of the underlying httpx client
    pool_max_size: int = Field(default=5, gt=0)
    timeout: int = Field(default=30, gt=0)


class Settings(BaseSettings):
    dropbox_sign: DropboxSignSettings = DropboxSignSettings()

    app_version: str = "v0.0.1-develop"

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=os.getenv("ENV_FILE_NAME", ".env"),
        extra="ignore",
    )


settings = Settings()
