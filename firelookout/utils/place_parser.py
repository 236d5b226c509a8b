"""
Parser for place documents returned by the place provider.
"""
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

ZIP_CODE_PLACE_TYPE = "Zip Code"


class PlaceParser:
	"""Parser for place lookups, ordered from finest to coarsest granularity."""

	@staticmethod
	def parse_places(document: Dict[str, Any]) -> Optional[List[Dict[str, str]]]:
		"""
		Extract name/type pairs from a place document.

		Args:
			document: Raw place document ({"query": {"count": n, "results": {"place": ...}}})

		Returns:
			List of {"name", "type"} dicts, or None when the document has no results
		"""
		query = document.get("query") or {}
		results = query.get("results")
		if not results:
			return None
		if not isinstance(results, dict):
			logger.warning(f"Place results are not an object: {type(results)}")
			return None

		items = results.get("place") or []
		# A single place is delivered as an object instead of a list
		if isinstance(items, dict):
			items = [items]

		places = []
		for item in items:
			if not isinstance(item, dict):
				logger.warning(f"Skipping place entry that is not an object: {item!r}")
				continue
			place_type = item.get("placeTypeName") or {}
			if isinstance(place_type, dict):
				place_type = place_type.get("content", "")
			places.append({"name": item.get("name", ""), "type": place_type})
		return places

	@staticmethod
	def select_place_name(places: List[Dict[str, str]]) -> str:
		"""
		Pick the first place name that is not a zip code.

		Returns:
			The place name, or an empty string when only zip codes were found
		"""
		for place in places:
			if place.get("type") != ZIP_CODE_PLACE_TYPE:
				return place.get("name", "")
		return ""
