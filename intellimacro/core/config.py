"""
Configuration and constants for the IntelliMacro service.
"""
import os
from dotenv import load_dotenv

from intellimacro.core.errors import ConfigurationError

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # OpenAI Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
    OPENAI_BASE_URL: str | None = os.getenv("OPENAI_BASE_URL") or None
    OPENAI_TIMEOUT_SECONDS: float = float(os.getenv("OPENAI_TIMEOUT_SECONDS", 90))

    # Internal API auth
    INTERNAL_API_SECRET: str = os.getenv("INTERNAL_API_SECRET", "")

    # Server Configuration
    PORT: int = int(os.getenv("PORT", 10000))
    HOST: str = "0.0.0.0"
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"

    # AI Temperature Settings
    TEMPERATURE_EXTRACTION: float = 0.0  # Grocery consolidation
    TEMPERATURE_ANALYSIS: float = 0.5    # Fitness age, recipe analysis
    TEMPERATURE_CREATIVE: float = 0.7    # Meal plans, simulated products

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration on startup."""
        missing = []

        if not cls.OPENAI_API_KEY:
            missing.append("OPENAI_API_KEY")

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )


settings = Settings()
