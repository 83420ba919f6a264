"""Employer profile service."""
from typing import Optional

from sqlalchemy.orm import Session

from skillswipe.persistence.models import Employer


class EmployerService:
    """Service for employer profiles."""

    def __init__(self, session: Session):
        self.session = session

    def save_employer(
        self,
        employer_id: str,
        company_name: str,
        email: str = "",
        description: str = "",
        location: str = "",
    ) -> Employer:
        """Create or update an employer profile."""
        employer = self.session.get(Employer, employer_id)
        if employer is None:
            employer = Employer(id=employer_id)
            self.session.add(employer)

        employer.company_name = company_name
        employer.email = email
        employer.description = description
        employer.location = location

        self.session.commit()
        self.session.refresh(employer)
        return employer

    def get_employer(self, employer_id: str) -> Optional[Employer]:
        """Get an employer by ID."""
        return self.session.get(Employer, employer_id)
