from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyzerConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INSIGHTFLOW_ANALYZER__",
        env_file=".env",
        extra="ignore",
    )

    # Rows inspected per column when inferring its role
    sample_size: int = Field(5, ge=1)
    # Characters removed before a string is tested as a number
    strip_chars: list[str] = ["$", ","]
    date_formats: list[str] = [
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%m/%d/%Y",
        "%d/%m/%Y",
        "%d-%m-%Y",
        "%m-%d-%Y",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%d %H:%M",
        "%m/%d/%Y %H:%M:%S",
        "%m/%d/%Y %H:%M",
        "%b %d, %Y",
        "%B %d, %Y",
        "%d %b %Y",
        "%d %B %Y",
        "%b %Y",
        "%B %Y",
    ]
    strategies: list[str] = ["trend", "comparison", "distribution", "average"]
    selection_policy: str = "first"  # "first" | "variance"
    max_insights: int = Field(7, ge=0)
    bar_top_n: int = Field(5, ge=1)
    pie_top_n: int = Field(6, ge=1)
    unknown_label: str = "Unknown"


class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INSIGHTFLOW_SERVER__",
        env_file=".env",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8000
    max_upload_bytes: int = 20 * 1024 * 1024
    log_level: str = "INFO"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    analyzer: AnalyzerConfig = AnalyzerConfig()
    server: ServerConfig = ServerConfig()


settings = Settings()
