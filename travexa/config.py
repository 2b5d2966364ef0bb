"""
TraveXa Service Configuration
Loads settings from environment variables
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment"""

    # AI Gateway Configuration (OpenAI-compatible chat completions)
    AI_GATEWAY_URL: str = os.getenv("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1")
    AI_GATEWAY_API_KEY: str = os.getenv("AI_GATEWAY_API_KEY", os.getenv("LOVABLE_API_KEY", ""))
    ITINERARY_MODEL: str = os.getenv("ITINERARY_MODEL", "google/gemini-2.5-flash")
    TRIP_PLAN_MODEL: str = os.getenv("TRIP_PLAN_MODEL", "google/gemini-3-pro-preview")

    # Amadeus Configuration (TEST environment by default)
    AMADEUS_API_KEY: str = os.getenv("AMADEUS_API_KEY", "")
    AMADEUS_API_SECRET: str = os.getenv("AMADEUS_API_SECRET", "")
    AMADEUS_HOST: str = os.getenv("AMADEUS_HOST", "test.api.amadeus.com")

    # Supabase Configuration (service role, server side only)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_SERVICE_ROLE_KEY: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")

    # Redis Configuration
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_DB: int = int(os.getenv("REDIS_DB", "0"))

    # API Configuration
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_ENV: str = os.getenv("API_ENV", "development")

    # CORS Configuration
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Outbound HTTP
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "60"))

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def amadeus_base_url(self) -> str:
        return f"https://{self.AMADEUS_HOST}"

    @property
    def amadeus_configured(self) -> bool:
        return bool(self.AMADEUS_API_KEY and self.AMADEUS_API_SECRET)

    @property
    def gateway_configured(self) -> bool:
        return bool(self.AI_GATEWAY_API_KEY)

    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY)


# Global settings instance
settings = Settings()
