"""
Time-indexed weather forecast series and nearest-sample lookup.
"""
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Sequence
from firelookout.schemas.weather import WeatherSample, INVALID_WEATHER
from firelookout.utils.datetime_utils import ensure_utc, minutes_between
from firelookout.utils.forecast_parser import ForecastParser
import logging

logger = logging.getLogger(__name__)


class ForecastSeries:
	"""
	Ordered, read-only sequence of weather samples for one location.

	The source ordering is trusted (non-decreasing by time) and never re-sorted.
	A scout replaces its series wholesale on every successful forecast fetch.
	"""

	def __init__(self, samples: Sequence[WeatherSample], range: Optional[Dict[str, Any]] = None):
		self._samples = tuple(samples)
		self.range = range or {}

	@classmethod
	def from_document(cls, document: Dict[str, Any]) -> "ForecastSeries":
		"""
		Decode a point forecast document into a series.
		Entries without a usable time are skipped.

		Raises:
			ValueError: If the document does not have the spatio-temporal weather layout
		"""
		entries = ForecastParser.get_temporal_entries(document)
		samples = []
		for entry in entries:
			sample = ForecastParser.parse_sample(entry)
			if sample is not None:
				samples.append(sample)
		return cls(samples, ForecastParser.get_range(document))

	def __len__(self) -> int:
		return len(self._samples)

	def __getitem__(self, index: int) -> WeatherSample:
		return self._samples[index]

	def __iter__(self) -> Iterator[WeatherSample]:
		return iter(self._samples)

	def __repr__(self) -> str:
		if not self._samples:
			return "ForecastSeries([])"
		return f"ForecastSeries({len(self._samples)} samples, {self._samples[0].time.isoformat()} .. {self._samples[-1].time.isoformat()})"


def sample_at(series: Optional[ForecastSeries], query_time: Optional[datetime]) -> WeatherSample:
	"""
	Returns the forecast sample nearest the given time.

	Scans forward and stays on the current sample while the query time is less than
	halfway to the next one. At exactly the midpoint the later sample is selected.
	Times before the first sample select the first, times after the last select the last.

	Args:
		series: Forecast series, or None before the first fetch
		query_time: Time used to select the sample; None selects the first sample

	Returns:
		The selected sample, or INVALID_WEATHER when there is no forecast data
	"""
	if not series:
		logger.warning("sample_at: missing weather data")
		return INVALID_WEATHER

	if query_time is None:
		return series[0]

	query_time = ensure_utc(query_time)
	last = len(series) - 1
	i = 0
	while i < last:
		current_time = series[i].time
		if query_time < current_time:
			break
		minutes_span = minutes_between(current_time, series[i + 1].time)
		minutes_elapsed = minutes_between(current_time, query_time)
		if minutes_elapsed < minutes_span / 2:
			break
		i += 1
	return series[i]


def get_all_forecasts(series: Optional[ForecastSeries]) -> List[WeatherSample]:
	"""
	Returns every sample in the series, in order.

	Args:
		series: Forecast series, or None before the first fetch

	Returns:
		List of samples; empty when there is no forecast data
	"""
	if series is None:
		logger.error("get_all_forecasts: missing weather data")
		return []
	return list(series)
