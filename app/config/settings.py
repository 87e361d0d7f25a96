from pydantic import Field
from pydantic_settings import BaseSettings


# ----------------------------
# General / App settings
# ----------------------------
class AppSettings(BaseSettings):
    app_name: str = "User API"
    app_version: str = "1.0"
    description: str = "OpenAPI for Users"
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Interactive docs mount point
    docs_url: str = "/api"
    greeting: str = "halo world"

    # Logger
    log_file: str = "app.log"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(BaseSettings):
    app: AppSettings = Field(default_factory=AppSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
