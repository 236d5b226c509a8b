import json
import redis
import logging
from typing import List, Optional
from pydantic import ValidationError as PydanticValidationError
from firelookout.config import settings
from firelookout.schemas.scout import ScoutParameters

logger = logging.getLogger(__name__)


class ScoutStore:
	"""
	Scout parameters kept in Redis as JSON, one key per scout.
	Only the parameters a scout is created from are stored; forecasts and
	fire behavior are recomputed after a restore.
	"""

	KEY_PREFIX = "scout:"

	def __init__(self, client: Optional[redis.Redis] = None, ttl: Optional[int] = None):
		self.client = client or redis.Redis(
			host=settings.redis_host,
			port=settings.redis_port,
			db=settings.redis_db,
			password=settings.redis_password,
			decode_responses=True,
			socket_connect_timeout=5,
			socket_timeout=5
		)
		self.ttl = ttl

	def key_for(self, scout_id: str) -> str:
		return f"{self.KEY_PREFIX}{scout_id}"

	def save(self, parameters: ScoutParameters) -> bool:
		"""
		Store the parameters of one scout, replacing any previous value.

		Args:
			parameters: Scout parameters

		Returns:
			True if Redis accepted the value

		Raises:
			ValueError: If Redis is unavailable
		"""
		key = self.key_for(parameters.id)
		try:
			if self.ttl:
				return bool(self.client.setex(key, self.ttl, parameters.to_redis_json()))
			return bool(self.client.set(key, parameters.to_redis_json()))
		except redis.RedisError as e:
			raise ValueError(f"Failed to save scout {parameters.id}: {str(e)}")

	def load(self, scout_id: str) -> Optional[ScoutParameters]:
		"""
		Read the parameters of one scout.

		Returns:
			The parameters, or None when the key is missing or holds something else
		"""
		key = self.key_for(scout_id)
		try:
			value = self.client.get(key)
		except redis.RedisError as e:
			raise ValueError(f"Failed to read scout {scout_id}: {str(e)}")
		if value is None:
			return None
		return self._decode(key, value)

	def _decode(self, key: str, value: str) -> Optional[ScoutParameters]:
		try:
			data = json.loads(value)
		except json.JSONDecodeError:
			logger.warning(f"Redis key {key} does not hold JSON")
			return None

		if not isinstance(data, dict):
			logger.warning(f"Scout data from Redis key {key} is not a dictionary: {type(data)}")
			return None

		try:
			return ScoutParameters.from_dict(data)
		except PydanticValidationError as e:
			logger.warning(f"Invalid scout parameters in Redis key {key}: {str(e)}")
			return None

	def load_all(self) -> List[ScoutParameters]:
		"""
		Read the parameters of every stored scout, skipping unreadable ones.
		"""
		try:
			keys = list(self.client.scan_iter(match=f"{self.KEY_PREFIX}*"))
		except redis.RedisError as e:
			raise ValueError(f"Failed to list scouts: {str(e)}")

		results = []
		for key in keys:
			parameters = self.load(key[len(self.KEY_PREFIX):])
			if parameters is not None:
				results.append(parameters)
		return results

	def delete(self, scout_id: str) -> bool:
		"""
		Returns:
			True if the scout was stored, False if there was nothing to delete
		"""
		try:
			return bool(self.client.delete(self.key_for(scout_id)))
		except redis.RedisError as e:
			raise ValueError(f"Failed to delete scout {scout_id}: {str(e)}")

	def ping(self) -> bool:
		"""
		Test Redis connection.
		"""
		try:
			return bool(self.client.ping())
		except redis.RedisError as e:
			raise ConnectionError(f"Redis connection failed: {str(e)}")
