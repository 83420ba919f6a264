"""Skill categorization and match scoring."""
from .classifier import UNCATEGORIZED_NAME, SkillCategory, SkillClassifier
from .match_score import (
    MatchResult,
    MatchScorer,
    ScoreBand,
    calculate_score,
    color_for_percentage,
    label_for_percentage,
)
from .ranker import CandidateRanker, ScoredStudent
from .skills import distinct_skills, normalize_skill, skills_equivalent

__all__ = [
    "SkillCategory",
    "SkillClassifier",
    "UNCATEGORIZED_NAME",
    "MatchResult",
    "MatchScorer",
    "ScoreBand",
    "calculate_score",
    "color_for_percentage",
    "label_for_percentage",
    "CandidateRanker",
    "ScoredStudent",
    "distinct_skills",
    "normalize_skill",
    "skills_equivalent",
]
