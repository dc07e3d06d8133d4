"""Cache key builders."""

from productcache.infrastructure.key_builders.default import DefaultKeyBuilder

__all__ = ["DefaultKeyBuilder"]
