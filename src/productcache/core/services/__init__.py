"""Domain services for productcache."""

from productcache.core.services.product_service import ProductService

__all__ = ["ProductService"]
