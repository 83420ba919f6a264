"""Candidate ranking and filtering by match score."""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from skillswipe.matching.match_score import MatchResult, MatchScorer
from skillswipe.matching.scorer_protocol import Scorer

logger = logging.getLogger(__name__)


@dataclass
class ScoredStudent:
    """A student together with their match result."""

    student: Any  # anything exposing a ``skills`` list, usually a Student row
    match_result: MatchResult

    @property
    def percentage(self) -> int:
        return self.match_result.percentage

    @property
    def matched_skills(self) -> list[str]:
        return self.match_result.matched_skills


class CandidateRanker:
    """Score and rank students against an employer's required skills."""

    def __init__(self, scorer: Optional[Scorer] = None, min_percentage: int = 0):
        """
        Initialize candidate ranker.

        Args:
            scorer: Scoring engine (defaults to MatchScorer)
            min_percentage: Minimum match percentage to include (0-100)
        """
        self.scorer = scorer or MatchScorer()
        self.min_percentage = min_percentage

    def rank(
        self,
        students: Iterable[Any],
        required_skills: Iterable[str],
    ) -> list[ScoredStudent]:
        """
        Score a list of students.

        Args:
            students: Students to score
            required_skills: Skills the employer selected

        Returns:
            ScoredStudent list, best match first. Equal percentages keep
            input order.
        """
        # Materialize once so every student sees the same order
        required = list(dict.fromkeys(required_skills))
        scored: list[ScoredStudent] = []

        for student in students:
            result = self.scorer.score(getattr(student, "skills", None) or [], required)
            if result.percentage < self.min_percentage:
                continue
            scored.append(ScoredStudent(student=student, match_result=result))

        scored.sort(key=lambda s: s.percentage, reverse=True)

        logger.debug(
            "Ranked %d students against %d required skills",
            len(scored),
            len(required),
        )
        return scored

    def filter_by_percentage(
        self,
        scored: list[ScoredStudent],
        min_percentage: Optional[int] = None,
    ) -> list[ScoredStudent]:
        """Filter scored students by minimum percentage."""
        threshold = min_percentage if min_percentage is not None else self.min_percentage
        return [s for s in scored if s.percentage >= threshold]

    def get_top(self, scored: list[ScoredStudent], n: int = 10) -> list[ScoredStudent]:
        """Get top N students by match."""
        return scored[:n]
