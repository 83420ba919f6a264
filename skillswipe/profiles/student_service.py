"""Student profile service."""
import logging
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from skillswipe.matching.skills import distinct_skills
from skillswipe.persistence.models import Student

logger = logging.getLogger(__name__)


class StudentService:
    """Service for student profiles and the skill universe built from them."""

    def __init__(self, session: Session):
        """
        Initialize student service.

        Args:
            session: Database session
        """
        self.session = session

    def save_student(
        self,
        student_id: str,
        name: str,
        email: str = "",
        study_program: str = "",
        skills: Optional[Iterable[str]] = None,
        description: str = "",
    ) -> Student:
        """
        Create or update a student profile.

        Skills are stored trimmed and de-duplicated in their original case.

        Returns:
            The saved Student
        """
        student = self.session.get(Student, student_id)
        if student is None:
            student = Student(id=student_id)
            self.session.add(student)

        student.name = name
        student.email = email
        student.study_program = study_program
        student.skills = distinct_skills(skills or [])
        student.description = description

        self.session.commit()
        self.session.refresh(student)
        return student

    def get_student(self, student_id: str) -> Optional[Student]:
        """Get a student by ID."""
        return self.session.get(Student, student_id)

    def get_all_students(self) -> list[Student]:
        """Get all students ordered by name."""
        stmt = select(Student).order_by(Student.name)
        return list(self.session.execute(stmt).scalars().all())

    def get_all_skills(self) -> list[str]:
        """
        Collect the distinct skills of all students.

        Returns:
            Trimmed skills, sorted alphabetically
        """
        unique: set[str] = set()
        for skills in self.session.execute(select(Student.skills)).scalars():
            for skill in skills or []:
                trimmed = str(skill).strip()
                if trimmed:
                    unique.add(trimmed)
        return sorted(unique)

    def get_students_by_skills(self, selected_skills: Iterable[str]) -> list[Student]:
        """
        Get students with at least one of the selected skills.

        Comparison is on exact trimmed text; fuzzy matching happens later in
        scoring.
        """
        selected = {s.strip() for s in selected_skills}
        if not selected:
            return []

        matched = [
            student
            for student in self.get_all_students()
            if any(str(skill).strip() in selected for skill in student.skills or [])
        ]
        logger.debug("%d students share a selected skill", len(matched))
        return matched
