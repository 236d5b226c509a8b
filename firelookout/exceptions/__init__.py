from firelookout.exceptions.base import (
	LookoutException,
	NotFoundError,
	CatalogLookupError,
	ValidationError,
	ServiceError,
	ProviderError,
	ProviderTimeoutError
)

__all__ = [
	"LookoutException",
	"NotFoundError",
	"CatalogLookupError",
	"ValidationError",
	"ServiceError",
	"ProviderError",
	"ProviderTimeoutError"
]
