"""SQLAlchemy models for SkillSwipe."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class SkillCategoryRecord(Base):
    """Stored skill category; keywords are lowercase match terms."""

    __tablename__ = "skill_categories"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, unique=True, nullable=False)
    icon = Column(String, default="code")
    color = Column(String, default="#6B7280")
    keywords = Column(JSON, default=list)  # ["flutter", "dart", ...]
    order = Column(Integer, default=0, index=True)
    created_at = Column(DateTime, default=utcnow)

    def __repr__(self) -> str:
        return f"<SkillCategoryRecord {self.name} ({len(self.keywords or [])} keywords)>"


class Student(Base):
    """Student profile."""

    __tablename__ = "students"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False, default="")
    email = Column(String, default="")
    study_program = Column(String, default="")
    skills = Column(JSON, default=list)  # Free-text skills, display case
    description = Column(Text, default="")
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    likes = relationship("Like", back_populates="student", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Student {self.name} ({len(self.skills or [])} skills)>"


class Employer(Base):
    """Employer profile."""

    __tablename__ = "employers"

    id = Column(String, primary_key=True, default=generate_uuid)
    company_name = Column(String, nullable=False, default="")
    email = Column(String, default="")
    description = Column(Text, default="")
    location = Column(String, default="")
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    likes = relationship("Like", back_populates="employer", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Employer {self.company_name}>"


class Like(Base):
    """An employer swiped right on a student."""

    __tablename__ = "likes"

    id = Column(String, primary_key=True, default=generate_uuid)
    employer_id = Column(String, ForeignKey("employers.id"), nullable=False, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False)
    employer_name = Column(String, default="")
    created_at = Column(DateTime, default=utcnow)

    # Relationships
    employer = relationship("Employer", back_populates="likes")
    student = relationship("Student", back_populates="likes")

    def __repr__(self) -> str:
        return f"<Like {self.employer_id} -> {self.student_id}>"


class Notification(Base):
    """Inbox entry for a student."""

    __tablename__ = "notifications"

    id = Column(String, primary_key=True, default=generate_uuid)
    recipient_id = Column(String, nullable=False, index=True)
    sender_id = Column(String, nullable=False)
    sender_name = Column(String, default="")
    type = Column(String, default="like")
    message = Column(Text, default="")
    created_at = Column(DateTime, default=utcnow)
    is_read = Column(Boolean, default=False)

    def __repr__(self) -> str:
        return f"<Notification {self.type} for {self.recipient_id} (read={self.is_read})>"
