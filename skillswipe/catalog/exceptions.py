"""Skill category catalog exceptions."""


class CatalogError(Exception):
    """Base exception for category catalog errors."""

    pass


class CategoryNotFoundError(CatalogError):
    """Raised when a category ID does not exist."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Skill category not found: {category_id}")


class DuplicateCategoryError(CatalogError):
    """Raised when a category name is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Skill category already exists: {name}")


class InvalidCatalogError(CatalogError):
    """Raised when a default catalog file cannot be used."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid category catalog {path}: {reason}")
