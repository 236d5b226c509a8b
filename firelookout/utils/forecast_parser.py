"""
Parser for point forecast documents returned by the weather provider.
"""
import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence
from firelookout.schemas.weather import WeatherSample
from firelookout.utils.datetime_utils import parse_datetime_to_utc, parse_timestamp_ms
import logging

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class ForecastParser:
	"""Parser for extracting weather samples from a spatio-temporal weather document."""

	@staticmethod
	def parse_int(value: Any) -> float:
		"""
		Truncate a raw string or number to an integer value.

		Strings are read up to the first non-digit ("72.9" -> 72, "12abc" -> 12).

		Args:
			value: Raw value from the forecast document

		Returns:
			The truncated integer as a float, or NaN when the value is missing or not numeric
		"""
		if value is None or isinstance(value, bool):
			return math.nan
		if isinstance(value, (int, float)):
			if math.isnan(value) or math.isinf(value):
				return math.nan
			return float(int(value))
		match = _LEADING_INT.match(str(value))
		if not match:
			return math.nan
		return float(int(match.group(1)))

	@staticmethod
	def parse_time(raw_time: Any) -> Optional[datetime]:
		"""
		Parse an entry time given as an ISO string or epoch milliseconds.

		Returns:
			UTC datetime, or None when the time cannot be parsed
		"""
		if isinstance(raw_time, datetime):
			return raw_time
		if isinstance(raw_time, (int, float)) and not isinstance(raw_time, bool):
			return parse_timestamp_ms(raw_time)
		if isinstance(raw_time, str):
			return parse_datetime_to_utc(raw_time)
		return None

	@staticmethod
	def parse_sample(entry: Dict[str, Any]) -> Optional[WeatherSample]:
		"""
		Decode one temporal weather entry.

		The entry's values are ordered: air temperature (F), relative humidity (%),
		wind speed (kts), wind direction (deg), sky cover (%). Missing values become NaN.

		Args:
			entry: Entry with '@time' and 'values'

		Returns:
			WeatherSample, or None when the entry has no usable time
		"""
		time = ForecastParser.parse_time(entry.get("@time", entry.get("time")))
		if time is None:
			logger.warning(f"Skipping forecast entry without a valid time: {entry}")
			return None

		values: Sequence[Any] = entry.get("values") or []

		def value_at(index: int) -> float:
			return ForecastParser.parse_int(values[index]) if index < len(values) else math.nan

		return WeatherSample(
			time=time,
			air_temperature_f=value_at(0),
			relative_humidity_pct=value_at(1),
			wind_speed_kts=value_at(2),
			wind_direction_deg=value_at(3),
			sky_cover_pct=value_at(4)
		)

	@staticmethod
	def get_temporal_entries(document: Dict[str, Any]) -> List[Dict[str, Any]]:
		"""
		Extract the raw temporal weather entries from a forecast document.

		Raises:
			ValueError: If the document does not have the spatio-temporal weather layout
		"""
		try:
			entries = document["spatioTemporalWeather"]["spatialDomain"]["temporalDomain"]["temporalWeather"]
		except (KeyError, TypeError) as e:
			raise ValueError(f"Forecast document is missing temporal weather: {str(e)}")
		# A single entry may be delivered as an object instead of a list
		if isinstance(entries, dict):
			return [entries]
		return list(entries or [])

	@staticmethod
	def get_range(document: Dict[str, Any]) -> Dict[str, Any]:
		"""Extract the range (parameter and unit descriptions) from a forecast document."""
		return (document.get("spatioTemporalWeather") or {}).get("range") or {}
