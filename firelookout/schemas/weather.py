import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import ConfigDict, field_validator
from firelookout.schemas.base import BaseSchema
from firelookout.utils.datetime_utils import ensure_utc


def _tuple_value(value: float, unit: str) -> Dict[str, Any]:
	return {"value": None if math.isnan(value) else int(value), "unit": unit}


class WeatherSample(BaseSchema):
	"""
	One time-stamped weather forecast value set.

	Numeric fields hold truncated integers, or NaN when the source
	value was missing or not numeric.
	"""
	model_config = ConfigDict(frozen=True)

	time: datetime
	air_temperature_f: float
	relative_humidity_pct: float
	wind_speed_kts: float
	wind_direction_deg: float
	sky_cover_pct: float

	@field_validator("time")
	@classmethod
	def time_in_utc(cls, value: datetime) -> datetime:
		"""Naive times are taken as UTC."""
		return ensure_utc(value)

	@property
	def is_valid(self) -> bool:
		"""False for the missing-data sentinel and for samples without a temperature."""
		return self.time != EPOCH and not math.isnan(self.air_temperature_f)

	def to_tuple(self) -> Dict[str, Any]:
		"""
		Package this sample as the weather tuple expected by the fuel and fire providers.

		Returns:
			Dictionary of value/unit pairs; NaN values become None
		"""
		return {
			"airTemperature": _tuple_value(self.air_temperature_f, "fahrenheit"),
			"relativeHumidity": _tuple_value(self.relative_humidity_pct, "percent"),
			"windSpeed": _tuple_value(self.wind_speed_kts, "kts"),
			"windDirection": _tuple_value(self.wind_direction_deg, "degrees"),
			"cloudCover": _tuple_value(self.sky_cover_pct, "percent")
		}


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Returned whenever a forecast is requested and no forecast data is available
INVALID_WEATHER = WeatherSample(
	time=EPOCH,
	air_temperature_f=math.nan,
	relative_humidity_pct=math.nan,
	wind_speed_kts=math.nan,
	wind_direction_deg=math.nan,
	sky_cover_pct=math.nan
)
