"""Scorer protocol for pluggable match scoring.

MatchScorer is the keyword-equivalence implementation; any other scorer
used by CandidateRanker must satisfy the same protocol.
"""
from typing import Iterable, Protocol, runtime_checkable

from skillswipe.matching.match_score import MatchResult


@runtime_checkable
class Scorer(Protocol):
    """Protocol for candidate scoring engines."""

    def score(
        self,
        candidate_skills: Iterable[str],
        required_skills: Iterable[str],
    ) -> MatchResult:
        """Score one candidate's skills against the required skills."""
        ...
