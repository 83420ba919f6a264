"""Student and employer profiles."""
from .employer_service import EmployerService
from .student_service import StudentService

__all__ = ["StudentService", "EmployerService"]
