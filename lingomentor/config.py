from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    DATABASE_URL: str = "sqlite:///./data/lingomentor.db"
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Translation: "google" (Cloud Translation v2) or "llm" (OpenAI-compatible chat)
    TRANSLATION_PROVIDER: str = "google"
    GOOGLE_TRANSLATE_API_KEY: str = ""
    GOOGLE_TRANSLATE_URL: str = "https://translation.googleapis.com/language/translate/v2"
    LLM_BASE_URL: str = "http://localhost:8080/v1"
    LLM_API_KEY: str = "local"
    LLM_MODEL: str = "mlx-community/Qwen3-8B-4bit"

    # Object storage (Supabase Storage REST API)
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_KEY: str = ""
    VOICE_BUCKET: str = "voice-files"

    HTTP_TIMEOUT_S: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

# SQLite database lives under ./data by default
Path("data").mkdir(exist_ok=True)
