from .http_catalog_repository import HttpCatalogRepository

__all__ = ['HttpCatalogRepository']
