from typing import Any, Dict
import json
from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
	"""
	Base schema class with JSON-safe serialization/deserialization.
	"""

	model_config = ConfigDict(arbitrary_types_allowed=True)

	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-compatible dictionary (datetimes as ISO strings)."""
		return json.loads(self.model_dump_json())

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "BaseSchema":
		"""
		Create model instance from a dictionary.
		ISO datetime strings are parsed by pydantic for datetime fields only.
		"""
		return cls.model_validate(data)

	def to_redis_json(self) -> str:
		"""Serialize the schema object to a JSON string for Redis storage."""
		return self.model_dump_json()

	@classmethod
	def from_redis_json(cls, json_str: str) -> "BaseSchema":
		"""Deserialize a JSON string from Redis back into a schema object."""
		return cls.from_dict(json.loads(json_str))
