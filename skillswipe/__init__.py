"""SkillSwipe: skill categorization and student/employer match scoring."""

__version__ = "0.1.0"
