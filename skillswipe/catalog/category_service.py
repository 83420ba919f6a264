"""Skill category catalog service."""
import logging
from pathlib import Path
from typing import Optional

import yaml
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from config.settings import settings
from skillswipe.catalog.exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCatalogError,
)
from skillswipe.matching.classifier import SkillCategory
from skillswipe.matching.skills import normalize_skill
from skillswipe.persistence.models import SkillCategoryRecord

logger = logging.getLogger(__name__)


def load_default_categories(path: Optional[Path] = None) -> list[dict]:
    """
    Load the default category catalog from YAML.

    Args:
        path: Catalog file (defaults to config/default_categories.yaml)

    Returns:
        List of category mappings in display order
    """
    path = Path(path or settings.default_categories_path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidCatalogError(str(path), str(e)) from e

    categories = data.get("categories") if isinstance(data, dict) else None
    if not isinstance(categories, list):
        raise InvalidCatalogError(str(path), "expected a top-level 'categories' list")

    for entry in categories:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise InvalidCatalogError(str(path), f"category without a name: {entry!r}")
        keywords = entry.get("keywords")
        if keywords is not None and not isinstance(keywords, list):
            raise InvalidCatalogError(
                str(path), f"keywords of {entry['name']!r} must be a list, got {keywords!r}"
            )

    return categories


def _clean_keywords(keywords) -> list[str]:
    """Normalize keywords, dropping blanks and duplicates."""
    cleaned: list[str] = []
    for keyword in keywords or []:
        kw = normalize_skill(str(keyword))
        if kw and kw not in cleaned:
            cleaned.append(kw)
    return cleaned


class CategoryService:
    """Service for managing the skill category catalog."""

    def __init__(self, session: Session):
        """
        Initialize category service.

        Args:
            session: Database session
        """
        self.session = session

    def get_categories(self) -> list[SkillCategory]:
        """Get all categories sorted by display order."""
        stmt = select(SkillCategoryRecord).order_by(
            SkillCategoryRecord.order, SkillCategoryRecord.created_at
        )
        records = self.session.execute(stmt).scalars().all()
        return [SkillCategory.from_record(r) for r in records]

    def get_category(self, category_id: str) -> Optional[SkillCategory]:
        """Get a category by ID."""
        record = self.session.get(SkillCategoryRecord, category_id)
        return SkillCategory.from_record(record) if record else None

    def add_category(self, category: SkillCategory) -> SkillCategory:
        """
        Create a new category.

        Args:
            category: Category to store (its ``id`` is ignored)

        Returns:
            The stored category with its generated ID

        Raises:
            DuplicateCategoryError: If the name is already in use
        """
        if self._find_by_name(category.name) is not None:
            raise DuplicateCategoryError(category.name)

        record = SkillCategoryRecord(
            name=category.name,
            icon=category.icon,
            color=category.color,
            keywords=_clean_keywords(category.keywords),
            order=category.order,
        )
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)

        logger.info("Created skill category %s", record.name)
        return SkillCategory.from_record(record)

    def update_category(self, category: SkillCategory) -> SkillCategory:
        """
        Overwrite an existing category.

        Raises:
            CategoryNotFoundError: If ``category.id`` is unknown
            DuplicateCategoryError: If renamed onto another category's name
        """
        record = self._get_record(category.id)

        existing = self._find_by_name(category.name)
        if existing is not None and existing.id != record.id:
            raise DuplicateCategoryError(category.name)

        record.name = category.name
        record.icon = category.icon
        record.color = category.color
        record.keywords = _clean_keywords(category.keywords)
        record.order = category.order
        self.session.commit()

        return SkillCategory.from_record(record)

    def add_keyword(self, category_id: str, keyword: str) -> SkillCategory:
        """Add a keyword to a category (no-op if already present)."""
        record = self._get_record(category_id)
        kw = normalize_skill(keyword)

        keywords = list(record.keywords or [])
        if kw and kw not in keywords:
            # Reassign so the JSON column is flagged dirty
            record.keywords = keywords + [kw]
            self.session.commit()

        return SkillCategory.from_record(record)

    def remove_keyword(self, category_id: str, keyword: str) -> SkillCategory:
        """Remove a keyword from a category (no-op if absent)."""
        record = self._get_record(category_id)
        kw = normalize_skill(keyword)

        keywords = list(record.keywords or [])
        if kw in keywords:
            record.keywords = [k for k in keywords if k != kw]
            self.session.commit()

        return SkillCategory.from_record(record)

    def delete_category(self, category_id: str) -> bool:
        """Delete a category. Returns False if it did not exist."""
        record = self.session.get(SkillCategoryRecord, category_id)
        if record is None:
            return False

        self.session.delete(record)
        self.session.commit()
        logger.info("Deleted skill category %s", record.name)
        return True

    def is_empty(self) -> bool:
        count = self.session.execute(
            select(func.count()).select_from(SkillCategoryRecord)
        ).scalar_one()
        return count == 0

    def seed_defaults_if_empty(self, path: Optional[Path] = None) -> int:
        """
        Install the default catalog when no categories exist yet.

        Safe to call on every startup.

        Args:
            path: Catalog file (defaults to config/default_categories.yaml)

        Returns:
            Number of categories written (0 if the catalog was not empty)
        """
        if not self.is_empty():
            return 0

        defaults = load_default_categories(path)
        for position, entry in enumerate(defaults):
            category = SkillCategory.from_dict(entry, order=position)
            self.session.add(
                SkillCategoryRecord(
                    name=category.name,
                    icon=category.icon,
                    color=category.color,
                    keywords=_clean_keywords(category.keywords),
                    order=category.order,
                )
            )
        self.session.commit()

        logger.info("Seeded %d default skill categories", len(defaults))
        return len(defaults)

    def _get_record(self, category_id: Optional[str]) -> SkillCategoryRecord:
        record = self.session.get(SkillCategoryRecord, category_id) if category_id else None
        if record is None:
            raise CategoryNotFoundError(str(category_id))
        return record

    def _find_by_name(self, name: str) -> Optional[SkillCategoryRecord]:
        stmt = select(SkillCategoryRecord).where(SkillCategoryRecord.name == name)
        return self.session.execute(stmt).scalar_one_or_none()
