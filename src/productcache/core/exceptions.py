"""Exceptions raised by productcache."""


class ProductCacheError(Exception):
    """Base class for productcache errors."""

    pass


class CacheStoreError(ProductCacheError):
    """Raised when a cache store cannot accept a value."""

    pass
