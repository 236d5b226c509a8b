import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings:
	# Logging
	log_level: str = os.getenv("LOG_LEVEL", "INFO")

	# Redis configuration (scout parameter persistence)
	redis_host: str = os.getenv("REDIS_HOST", "localhost")
	redis_port: int = int(os.getenv("REDIS_PORT", "6379"))
	redis_db: int = int(os.getenv("REDIS_DB", "0"))
	redis_password: Optional[str] = os.getenv("REDIS_PASSWORD", None)

	# Remote provider endpoints
	weather_base_url: str = os.getenv("WEATHER_BASE_URL", "http://localhost:8080/wmt-rest/rs/weather")
	place_base_url: str = os.getenv("PLACE_BASE_URL", "http://localhost:8080/wmt-rest/rs/places")
	sunlight_base_url: str = os.getenv("SUNLIGHT_BASE_URL", "http://localhost:8080/wmt-rest/rs/sunlight")
	surface_fuel_base_url: str = os.getenv("SURFACE_FUEL_BASE_URL", "http://localhost:8080/wmt-rest/rs/surfacefuel")
	surface_fire_base_url: str = os.getenv("SURFACE_FIRE_BASE_URL", "http://localhost:8080/wmt-rest/rs/surfacefire")
	landfire_base_url: str = os.getenv("LANDFIRE_BASE_URL", "http://localhost:8080/wmt-rest/rs/landfire")
	provider_user_agent: str = os.getenv("PROVIDER_USER_AGENT", "firelookout")

	# Retries are handled by the http clients, timeouts by the refresh pipeline.
	# A timeout of 0 disables the pipeline timeout.
	provider_max_retries: int = int(os.getenv("PROVIDER_MAX_RETRIES", "3"))
	provider_retry_backoff_seconds: float = float(os.getenv("PROVIDER_RETRY_BACKOFF_SECONDS", "0.5"))
	provider_timeout_seconds: float = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "30"))

	# Scout defaults
	default_forecast_duration_hours: int = int(os.getenv("DEFAULT_FORECAST_DURATION_HOURS", "72"))
	default_fuel_model_no: int = int(os.getenv("DEFAULT_FUEL_MODEL_NO", "5"))
	default_fuel_moisture_scenario: str = os.getenv("DEFAULT_FUEL_MOISTURE_SCENARIO", "Very Low Dead, Fully Cured Herb")

	@property
	def provider_timeout(self) -> Optional[float]:
		"""Timeout applied to each provider call, or None when disabled."""
		if self.provider_timeout_seconds <= 0:
			return None
		return self.provider_timeout_seconds

	@property
	def redis_url(self) -> str:
		if self.redis_password:
			return f"redis://:{self.redis_password}@{self.redis_host}:{self.redis_port}/{self.redis_db}"
		return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

settings = Settings()
