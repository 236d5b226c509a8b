from typing import Optional

class LookoutException(Exception):
	"""
	Base exception class for all firelookout custom exceptions.
	"""
	def __init__(self, message: str, detail: Optional[str] = None):
		self.message = message
		self.detail = detail or message
		super().__init__(self.message)

class NotFoundError(LookoutException):
	"""
	Exception raised when a keyed resource is not found.
	"""
	def __init__(self, resource_type: str, resource_id: str):
		self.resource_type = resource_type
		self.resource_id = resource_id
		message = f"{resource_type} '{resource_id}' not found"
		super().__init__(message=message, detail=message)

class CatalogLookupError(NotFoundError):
	"""
	Exception raised when a fuel model or fuel moisture scenario
	is not in its catalog.
	"""

class ValidationError(LookoutException):
	"""
	Exception raised when scout parameters are invalid.
	"""
	def __init__(self, message: str, detail: Optional[str] = None):
		super().__init__(message=message, detail=detail or message)

class ServiceError(LookoutException):
	"""
	Exception raised when a service operation fails.
	"""
	def __init__(self, message: str, detail: Optional[str] = None):
		super().__init__(message=message, detail=detail or message)

class ProviderError(ServiceError):
	"""
	Exception raised when a remote provider call fails after all retries.
	"""
	def __init__(self, provider: str, message: str):
		self.provider = provider
		super().__init__(message=f"{provider}: {message}")

class ProviderTimeoutError(ProviderError):
	"""
	Exception raised when a remote provider does not answer in time.
	"""
	def __init__(self, provider: str, timeout: float):
		self.timeout = timeout
		super().__init__(provider, f"no response after {timeout} seconds")
