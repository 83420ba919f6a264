"""Database persistence layer."""
from .database import get_session, init_db
from .models import Base, Employer, Like, Notification, SkillCategoryRecord, Student

__all__ = [
    "Base",
    "SkillCategoryRecord",
    "Student",
    "Employer",
    "Like",
    "Notification",
    "init_db",
    "get_session",
]
