# config/settings.py
import os
from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings(BaseModel):
    # App Configuration
    app_name: str = "PocketCare AI"
    debug: bool = False
    version: str = "1.0.0"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 2000
    reload: bool = False

    # Google AI Configuration
    google_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash"

    # Conversation Configuration
    serialize_persona_requests: bool = True

    # CORS Configuration
    cors_origins: list[str] = ["*"]

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "json"

def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"

def get_settings() -> Settings:
    """Create settings instance with environment variables."""
    return Settings(
        google_api_key=os.getenv("GOOGLE_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT") or 2000),
        serialize_persona_requests=_env_flag("SERIALIZE_PERSONA_REQUESTS", "true"),
        debug=_env_flag("DEBUG", "false"),
        reload=_env_flag("RELOAD", "false"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        cors_origins=os.getenv("CORS_ORIGINS").split(",") if os.getenv("CORS_ORIGINS") else ["*"]
    )

# Create the settings instance
settings = get_settings()
