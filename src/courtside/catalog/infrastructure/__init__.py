from .in_memory_catalog_repository import (
    InMemoryCatalogRepository,
    default_catalog,
)

__all__ = ["InMemoryCatalogRepository", "default_catalog"]
