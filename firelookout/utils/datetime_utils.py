"""
Datetime utility functions.
"""
from typing import Optional, Union
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


def ensure_utc(dt: datetime) -> datetime:
	"""
	Return a timezone-aware UTC datetime.
	Naive datetimes are assumed to already be in UTC.
	"""
	if dt.tzinfo is None:
		return dt.replace(tzinfo=timezone.utc)
	return dt.astimezone(timezone.utc)


def minutes_between(start: datetime, end: datetime) -> float:
	"""
	Signed number of minutes from start to end.

	Args:
		start: Earlier datetime
		end: Later datetime

	Returns:
		Minutes elapsed (negative when end is before start)
	"""
	return (ensure_utc(end) - ensure_utc(start)).total_seconds() / 60.0


def parse_timestamp_ms(timestamp_ms: Optional[Union[int, float]]) -> Optional[datetime]:
	"""
	Convert milliseconds timestamp to datetime.

	Args:
		timestamp_ms: Timestamp in milliseconds

	Returns:
		datetime object in UTC, or None if timestamp is None
	"""
	if timestamp_ms is None:
		return None
	return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def parse_datetime_to_utc(dt_string: Optional[str]) -> Optional[datetime]:
	"""
	Parse a datetime string to a datetime object in UTC.

	Handles formats like:
	- 2016-03-15T04:45:00-08:00 (with timezone offset)
	- 2016-03-15T04:45:00Z (Zulu/UTC)
	- 2016-03-15T04:45:00 (no offset, assumed UTC)

	Args:
		dt_string: ISO format datetime string or None

	Returns:
		datetime object in UTC timezone or None
	"""
	if dt_string is None:
		return None
	try:
		if dt_string.endswith('Z'):
			dt_string = dt_string[:-1] + '+00:00'
		return ensure_utc(datetime.fromisoformat(dt_string))
	except (ValueError, AttributeError) as e:
		logger.warning(f"Failed to parse datetime string '{dt_string}': {str(e)}")
		return None
