"""Main entry point for SkillSwipe: skill filter building and candidate ranking."""
import argparse
import asyncio
import logging
import sys
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from config.settings import settings
from skillswipe.catalog.category_service import CategoryService
from skillswipe.likes.like_service import LikeService
from skillswipe.logging_config import setup_logging
from skillswipe.matching.classifier import SkillCategory, SkillClassifier
from skillswipe.matching.match_score import calculate_score
from skillswipe.matching.ranker import CandidateRanker, ScoredStudent
from skillswipe.notifications.like_notifier import LikeNotifier
from skillswipe.persistence.database import get_session, init_db
from skillswipe.profiles.student_service import StudentService

logger = logging.getLogger(__name__)


def build_skill_filter(session: Session) -> dict[SkillCategory, list[str]]:
    """
    Group every student skill into categories for the employer filter.

    Seeds the default catalog first if it is empty.

    Args:
        session: Database session

    Returns:
        Category to skills mapping, "Sonstiges" last when present
    """
    catalog = CategoryService(session)
    catalog.seed_defaults_if_empty()

    categories = catalog.get_categories()
    skills = StudentService(session).get_all_skills()
    logger.info("Building skill filter: %d categories, %d skills", len(categories), len(skills))

    return SkillClassifier().classify(categories, skills)


def rank_students(
    session: Session,
    required_skills: Iterable[str],
    min_percentage: Optional[int] = None,
) -> list[ScoredStudent]:
    """
    Rank all students against the required skills, best match first.

    Args:
        session: Database session
        required_skills: Skills the employer selected
        min_percentage: Hide students below this (defaults to settings)
    """
    threshold = settings.min_match_percentage if min_percentage is None else min_percentage
    ranker = CandidateRanker(min_percentage=threshold)
    students = StudentService(session).get_all_students()
    return ranker.rank(students, required_skills)


async def like_student(
    session: Session,
    employer_id: str,
    student_id: str,
    employer_name: str,
    required_skills: Iterable[str] = (),
    notifier: Optional[LikeNotifier] = None,
) -> bool:
    """
    Record a like and forward the notification to Slack.

    Returns:
        True if the Slack message was delivered
    """
    _, notification = LikeService(session).save_like(employer_id, student_id, employer_name)

    student = StudentService(session).get_student(student_id)
    match_result = calculate_score(student.skills if student else [], required_skills)

    notifier = notifier or LikeNotifier(webhook_url=settings.slack_webhook_url)
    return await notifier.notify(notification, match_result)


def _print_filter(groups: dict[SkillCategory, list[str]]) -> None:
    for category, skills in groups.items():
        print(f"{category.name} ({len(skills)})")
        for skill in skills:
            print(f"  - {skill}")


def _print_ranking(scored: list[ScoredStudent]) -> None:
    if not scored:
        print("No matching students.")
        return
    for entry in scored:
        result = entry.match_result
        missing = ", ".join(result.missing_skills) or "-"
        print(
            f"{result.percentage:>3}%  {result.label:<9}  {entry.student.name}"
            f"  (missing: {missing})"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillswipe",
        description="Skill categorization and student matching.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed", help="Install default skill categories if none exist")
    subparsers.add_parser("categories", help="Show all student skills grouped by category")

    rank = subparsers.add_parser("rank", help="Rank students against required skills")
    rank.add_argument("skills", nargs="+", help="Required skills")
    rank.add_argument("--min-percentage", type=int, default=None, help="Hide weaker matches")
    rank.add_argument("--top", type=int, default=10, help="Number of students to show")

    like = subparsers.add_parser("like", help="Like a student and notify them")
    like.add_argument("employer_id")
    like.add_argument("student_id")
    like.add_argument("--employer-name", required=True)
    like.add_argument("--skills", nargs="*", default=[], help="Required skills for the match summary")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(
        level=args.log_level or settings.log_level,
        log_file=settings.log_file,
        matching_level=settings.matching_log_level,
    )

    init_db()

    try:
        with get_session() as session:
            if args.command == "seed":
                written = CategoryService(session).seed_defaults_if_empty()
                print(f"Seeded {written} categories" if written else "Catalog already populated")
            elif args.command == "categories":
                _print_filter(build_skill_filter(session))
            elif args.command == "rank":
                scored = rank_students(session, args.skills, args.min_percentage)
                _print_ranking(CandidateRanker().get_top(scored, args.top))
            elif args.command == "like":
                delivered = asyncio.run(
                    like_student(
                        session,
                        args.employer_id,
                        args.student_id,
                        args.employer_name,
                        required_skills=args.skills,
                    )
                )
                print("Like saved" + (" and sent to Slack" if delivered else ""))
    except Exception as e:
        logger.error("Error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
