"""Keyword-based grouping of free-text skills into categories."""
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from skillswipe.matching.skills import normalize_skill, skills_equivalent

logger = logging.getLogger(__name__)

# Synthetic bucket for skills that match no category
UNCATEGORIZED_NAME = "Sonstiges"
UNCATEGORIZED_ICON = "more_horiz"
UNCATEGORIZED_COLOR = "#6B7280"
UNCATEGORIZED_ORDER = 999


@dataclass(frozen=True)
class SkillCategory:
    """A named group of skills, defined by its keywords.

    ``icon`` and ``color`` are presentation metadata only.
    """

    name: str
    keywords: tuple[str, ...] = ()
    icon: str = "code"
    color: str = "#6B7280"
    order: int = 0
    id: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_record(cls, record: Any) -> "SkillCategory":
        """Build a category from a persisted SkillCategoryRecord."""
        return cls(
            id=record.id,
            name=record.name or "",
            keywords=tuple(record.keywords or ()),
            icon=record.icon or "code",
            color=record.color or "#6B7280",
            order=record.order or 0,
        )

    @classmethod
    def from_dict(cls, data: dict, order: Optional[int] = None) -> "SkillCategory":
        """Build a category from a plain mapping (e.g. YAML seed data)."""
        return cls(
            name=data.get("name", ""),
            keywords=tuple(
                normalize_skill(str(kw)) for kw in data.get("keywords") or ()
            ),
            icon=data.get("icon", "code"),
            color=data.get("color", "#6B7280"),
            order=data.get("order", 0) if order is None else order,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "icon": self.icon,
            "color": self.color,
            "keywords": list(self.keywords),
            "order": self.order,
        }

    def matches(self, skill: str) -> bool:
        """True if any keyword is equivalent to the skill."""
        return any(skills_equivalent(skill, keyword) for keyword in self.keywords)


def uncategorized_category() -> SkillCategory:
    """The fallback category appended for unmatched skills."""
    return SkillCategory(
        name=UNCATEGORIZED_NAME,
        icon=UNCATEGORIZED_ICON,
        color=UNCATEGORIZED_COLOR,
        order=UNCATEGORIZED_ORDER,
    )


class SkillClassifier:
    """Group a universe of skills into keyword-defined categories.

    Membership is not exclusive: a skill that matches keywords of several
    categories is listed under each of them.
    """

    @staticmethod
    def sort_categories(categories: Iterable[SkillCategory]) -> list[SkillCategory]:
        """Sort by ``order``; ties keep catalog order."""
        return sorted(categories, key=lambda c: c.order)

    def classify(
        self,
        categories: Sequence[SkillCategory],
        skills: Iterable[str],
    ) -> dict[SkillCategory, list[str]]:
        """
        Assign each skill to every category with a matching keyword.

        Args:
            categories: Categories in display order
            skills: Distinct, trimmed skill strings

        Returns:
            Mapping of category to its skills, in category order. Categories
            without skills are omitted. Skills matching no category are
            collected under a trailing "Sonstiges" category. Blank skills
            match nothing and also go to "Sonstiges".
        """
        grouped: dict[SkillCategory, list[str]] = {c: [] for c in categories}
        uncategorized: list[str] = []
        skill_count = 0

        for skill in skills:
            skill_count += 1
            display = skill.strip()
            matched = False

            for category, members in grouped.items():
                if category.matches(skill):
                    matched = True
                    if display not in members:
                        members.append(display)

            if not matched and display not in uncategorized:
                uncategorized.append(display)

        result = {c: members for c, members in grouped.items() if members}

        if uncategorized:
            result[uncategorized_category()] = uncategorized

        logger.debug(
            "Classified %d skills into %d categories (%d uncategorized)",
            skill_count,
            len(result),
            len(uncategorized),
        )
        return result
