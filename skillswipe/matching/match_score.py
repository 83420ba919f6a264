"""Match scoring between a candidate's skills and a set of required skills."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from skillswipe.matching.skills import normalize_skill, skills_equivalent


class ScoreBand(Enum):
    """Color bands for match percentages, strongest first."""

    STRONG = "strong"
    GOOD = "good"
    MEDIUM = "medium"
    WEAK = "weak"
    POOR = "poor"

    @property
    def color(self) -> str:
        return _BAND_COLORS[self]


_BAND_COLORS = {
    ScoreBand.STRONG: "#10B981",
    ScoreBand.GOOD: "#84CC16",
    ScoreBand.MEDIUM: "#F59E0B",
    ScoreBand.WEAK: "#F97316",
    ScoreBand.POOR: "#EF4444",
}

# (inclusive lower bound, band), evaluated top-down
_BAND_THRESHOLDS = [
    (80, ScoreBand.STRONG),
    (60, ScoreBand.GOOD),
    (40, ScoreBand.MEDIUM),
    (20, ScoreBand.WEAK),
]

# Label thresholds differ from the color bands
_LABEL_THRESHOLDS = [
    (90, "Perfect"),
    (75, "Very good"),
    (50, "Good"),
    (25, "Partial"),
]
_LOWEST_LABEL = "Low"


def color_for_percentage(percentage: int) -> ScoreBand:
    """Map a match percentage to its color band."""
    for threshold, band in _BAND_THRESHOLDS:
        if percentage >= threshold:
            return band
    return ScoreBand.POOR


def label_for_percentage(percentage: int) -> str:
    """Map a match percentage to a short qualitative label."""
    for threshold, label in _LABEL_THRESHOLDS:
        if percentage >= threshold:
            return label
    return _LOWEST_LABEL


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (``round`` rounds to even)."""
    return int(math.floor(value + 0.5))


@dataclass
class MatchResult:
    """Result of scoring one candidate against the required skills."""

    score: float  # 0.0-1.0
    percentage: int  # 0-100
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    total_required: int = 0  # 0 means no filter applied

    @property
    def is_filtered(self) -> bool:
        return self.total_required > 0

    @property
    def label(self) -> str:
        return label_for_percentage(self.percentage)

    @property
    def color_band(self) -> ScoreBand:
        return color_for_percentage(self.percentage)

    @property
    def color(self) -> str:
        return self.color_band.color


class MatchScorer:
    """Score candidates by the share of required skills they cover.

    Stateless; one instance can be shared freely.
    """

    def score(
        self,
        candidate_skills: Iterable[str],
        required_skills: Iterable[str],
    ) -> MatchResult:
        """
        Compute how many required skills a candidate covers.

        A required skill counts as matched when any candidate skill is
        equivalent to it (case-insensitive, substring in either direction).

        Args:
            candidate_skills: The candidate's skills, duplicates allowed
            required_skills: Skills selected as criteria; iteration order is
                the order of matched and missing skills in the result

        Returns:
            MatchResult. An empty requirement set is a perfect match.
        """
        # Exact duplicates collapse, as in a set
        required = list(dict.fromkeys(required_skills))

        if not required:
            return MatchResult(score=1.0, percentage=100, total_required=0)

        candidates = {normalize_skill(skill) for skill in candidate_skills}

        matched: list[str] = []
        missing: list[str] = []
        for skill in required:
            if any(skills_equivalent(candidate, skill) for candidate in candidates):
                matched.append(skill)
            else:
                missing.append(skill)

        score = len(matched) / len(required)

        return MatchResult(
            score=score,
            percentage=round_half_up(score * 100),
            matched_skills=matched,
            missing_skills=missing,
            total_required=len(required),
        )


_default_scorer = MatchScorer()


def calculate_score(
    candidate_skills: Iterable[str],
    required_skills: Iterable[str],
) -> MatchResult:
    """Score with a shared default MatchScorer."""
    return _default_scorer.score(candidate_skills, required_skills)
