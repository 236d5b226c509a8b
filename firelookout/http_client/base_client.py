import asyncio
from typing import Optional, Dict, Any
import httpx
from abc import ABC
from firelookout.config import settings
from firelookout.exceptions import ProviderError
import logging

logger = logging.getLogger(__name__)

class BaseHTTPClient(ABC):
	"""
	Base HTTP client for the remote providers.
	Retries failed requests with exponential backoff and raises ProviderError
	once the last attempt fails.
	"""

	provider_name: str = "provider"

	def __init__(
		self,
		base_url: str,
		default_headers: Optional[Dict[str, str]] = None,
		timeout: float = 30.0,
		max_retries: Optional[int] = None,
		backoff_seconds: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		self.base_url = base_url.rstrip('/')
		self.default_headers = {"User-Agent": settings.provider_user_agent, **(default_headers or {})}
		self.timeout = timeout
		self.max_retries = max(1, max_retries if max_retries is not None else settings.provider_max_retries)
		self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.provider_retry_backoff_seconds
		self.client = httpx.AsyncClient(
			base_url=self.base_url,
			headers=self.default_headers,
			timeout=self.timeout,
			transport=transport
		)

	async def _request(
		self,
		method: str,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		json: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Optional[Any]:
		merged_headers = {**self.default_headers, **(headers or {})}

		for attempt in range(self.max_retries):
			try:
				response = await self.client.request(
					method,
					endpoint,
					params=params,
					json=json,
					headers=merged_headers
				)
				response.raise_for_status()
				# No content: the provider has no result for this request
				if response.status_code == 204 or not response.content:
					return None
				return response.json()
			except httpx.HTTPStatusError as e:
				# Client errors are not going to succeed on retry
				if e.response.status_code < 500 or attempt == self.max_retries - 1:
					raise ProviderError(self.provider_name, f"{method} {endpoint} returned {e.response.status_code}")
				logger.warning(f"{self.provider_name}: {method} {endpoint} returned {e.response.status_code}, attempt {attempt + 1} of {self.max_retries}")
			except (httpx.HTTPError, ValueError) as e:
				if attempt == self.max_retries - 1:
					raise ProviderError(self.provider_name, f"{method} {endpoint} failed: {str(e)}")
				logger.warning(f"{self.provider_name}: {method} {endpoint} failed: {str(e)}, attempt {attempt + 1} of {self.max_retries}")
			await asyncio.sleep(self.backoff_seconds * (2 ** attempt))

	async def get(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Optional[Any]:
		"""
		Perform a GET request.

		Args:
			endpoint: API endpoint (relative to base_url)
			params: Query parameters
			headers: Additional headers (merged with default_headers)

		Returns:
			Response JSON, or None when the response has no content
		"""
		return await self._request("GET", endpoint, params=params, headers=headers)

	async def post(
		self,
		endpoint: str,
		json: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Optional[Any]:
		"""
		Perform a POST request with a JSON body.

		Returns:
			Response JSON, or None when the response has no content
		"""
		return await self._request("POST", endpoint, json=json, headers=headers)

	async def close(self):
		"""Close the HTTP client."""
		await self.client.aclose()

	async def __aenter__(self):
		return self

	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.close()
