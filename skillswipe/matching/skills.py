"""Skill normalization and fuzzy equivalence shared by classifier and scorer."""
from typing import Iterable


def normalize_skill(skill: str) -> str:
    """Return the comparison form of a skill: trimmed and case-folded."""
    return skill.strip().lower()


def skills_equivalent(a: str, b: str) -> bool:
    """
    Check whether two skill strings refer to the same competency.

    Both sides are normalized first. They are equivalent when they are equal
    or when either one contains the other, so "React" matches
    "React Native" in both directions.

    Empty strings never match anything; otherwise an empty keyword would be
    a substring of every skill.
    """
    left = normalize_skill(a)
    right = normalize_skill(b)
    if not left or not right:
        return False
    return left == right or right in left or left in right


def distinct_skills(skills: Iterable[str]) -> list[str]:
    """Trim skills, drop blanks and duplicates, keep first-seen order."""
    seen: dict[str, None] = {}
    for skill in skills:
        trimmed = str(skill).strip()
        if trimmed:
            seen.setdefault(trimmed)
    return list(seen)
