"""Naming domain package.

This package turns a species into a name for a newly arrived animal:
- NameCatalogLoader: Reads candidate names per species from the names file
- NameAssigner: Picks a random candidate for a species, or the fallback name
"""

from zoointake.naming.assigner import FALLBACK_NAME, NameAssigner
from zoointake.naming.catalog import NameCatalog, NameCatalogLoader

__all__ = [
    "FALLBACK_NAME",
    "NameAssigner",
    "NameCatalog",
    "NameCatalogLoader",
]
