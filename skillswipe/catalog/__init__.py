"""Skill category catalog."""
from skillswipe.catalog.category_service import CategoryService, load_default_categories
from skillswipe.catalog.exceptions import (
    CatalogError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCatalogError,
)

__all__ = [
    "CategoryService",
    "load_default_categories",
    "CatalogError",
    "CategoryNotFoundError",
    "DuplicateCategoryError",
    "InvalidCatalogError",
]
