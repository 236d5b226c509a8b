from typing import Dict, Any
from firelookout.http_client.base_client import BaseHTTPClient
from firelookout.providers import WeatherProvider, PlaceProvider
from firelookout.config import settings
from firelookout.exceptions import ProviderError

class WeatherClient(BaseHTTPClient, WeatherProvider):
	"""
	Point forecast client.
	"""

	provider_name = "weather"

	def __init__(self, base_url: str = settings.weather_base_url, **kwargs):
		super().__init__(base_url, default_headers={"Accept": "application/json"}, **kwargs)

	async def point_forecast(self, latitude: float, longitude: float, duration_hours: int) -> Dict[str, Any]:
		"""
		Get the spatio-temporal weather forecast at a point.

		Args:
			latitude: Latitude in degrees
			longitude: Longitude in degrees
			duration_hours: Number of forecast hours requested

		Returns:
			Forecast document ({"spatioTemporalWeather": {...}})
		"""
		document = await self.get(
			"/pointforecast",
			params={"latitude": latitude, "longitude": longitude, "duration": duration_hours}
		)
		if document is None:
			raise ProviderError(self.provider_name, "empty forecast document")
		return document


class PlaceClient(BaseHTTPClient, PlaceProvider):
	"""
	Reverse geocoding client: place names at a point.
	"""

	provider_name = "places"

	def __init__(self, base_url: str = settings.place_base_url, **kwargs):
		super().__init__(base_url, default_headers={"Accept": "application/json"}, **kwargs)

	async def places(self, latitude: float, longitude: float) -> Dict[str, Any]:
		"""
		Get the places containing a point.

		Returns:
			Place document ({"query": {"count": n, "results": {"place": [...]}}})
		"""
		document = await self.get("/", params={"latitude": latitude, "longitude": longitude})
		return document or {}
