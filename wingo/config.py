from pydantic_settings import BaseSettings, SettingsConfigDict
import os

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WINGO_")

    port: int = int(os.getenv("PORT", 3000))
    host: str = "0.0.0.0"
    data_url: str = "https://draw.ar-lottery01.com/WinGo/WinGo_1M/GetHistoryIssuePage.json"
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    fetch_retries: int = 3
    fetch_timeout: float = 8.0
    fetch_backoff: float = 1.0
    min_history: int = 30
    log_level: str = "INFO"

settings = Settings()
