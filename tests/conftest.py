"""Pytest fixtures for SkillSwipe tests."""
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from skillswipe.matching.classifier import SkillCategory
from skillswipe.persistence.models import Base, Employer, SkillCategoryRecord, Student


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


# =============================================================================
# CATEGORY FIXTURES
# =============================================================================


@pytest.fixture
def frontend():
    return SkillCategory(
        name="Frontend",
        keywords=("flutter", "dart", "react", "javascript", "css"),
        icon="web",
        color="#3B82F6",
        order=0,
    )


@pytest.fixture
def backend():
    return SkillCategory(
        name="Backend",
        keywords=("python", "django", "java", "rest api"),
        icon="dns",
        color="#10B981",
        order=1,
    )


@pytest.fixture
def mobile():
    return SkillCategory(
        name="Mobile",
        keywords=("flutter", "dart", "kotlin", "swift", "react native"),
        icon="phone_android",
        color="#06B6D4",
        order=2,
    )


@pytest.fixture
def sample_categories(frontend, backend, mobile):
    """Three categories in display order."""
    return [frontend, backend, mobile]


@pytest.fixture
def stored_categories(test_db):
    """Persist two categories and return their records."""
    records = [
        SkillCategoryRecord(name="Frontend", keywords=["react", "css"], order=0),
        SkillCategoryRecord(name="Databases", keywords=["sql", "mongodb"], order=1),
    ]
    test_db.add_all(records)
    test_db.commit()
    return records


# =============================================================================
# PROFILE FIXTURES
# =============================================================================


@pytest.fixture
def sample_student(test_db):
    """Create a sample student for testing."""
    student = Student(
        id="student-1",
        name="Lena Vogt",
        email="lena@uni.example",
        study_program="Computer Science",
        skills=["Flutter", "Dart", "Firebase"],
        description="Mobile developer",
    )
    test_db.add(student)
    test_db.commit()
    return student


@pytest.fixture
def multiple_students(test_db):
    """Create students with overlapping skills for ranking tests."""
    students = [
        Student(id="s-1", name="Ada", skills=["Python", "SQL", "Docker"]),
        Student(id="s-2", name="Ben", skills=["React", "CSS"]),
        Student(id="s-3", name="Cleo", skills=["python", "Machine Learning"]),
        Student(id="s-4", name="Dan", skills=[]),
    ]
    test_db.add_all(students)
    test_db.commit()
    return students


@pytest.fixture
def sample_employer(test_db):
    """Create a sample employer for testing."""
    employer = Employer(
        id="employer-1",
        company_name="Nordlicht GmbH",
        email="jobs@nordlicht.example",
        location="Hamburg",
    )
    test_db.add(employer)
    test_db.commit()
    return employer


# =============================================================================
# MOCK FIXTURES (For external services)
# =============================================================================


@pytest.fixture
def mock_http_session():
    """Mock aiohttp session for notifier tests."""
    with patch("aiohttp.ClientSession") as mock:
        mock_session = MagicMock()
        mock_response = MagicMock()
        mock_response.status = 200
        mock_session.post.return_value.__aenter__.return_value = mock_response
        mock.return_value.__aenter__.return_value = mock_session
        yield mock_session


# =============================================================================
# TEMPORARY DIRECTORY FIXTURES
# =============================================================================


@pytest.fixture
def temp_catalog(tmp_path):
    """Write a small catalog YAML file and return its path."""
    path = tmp_path / "categories.yaml"
    path.write_text(
        "categories:\n"
        "  - name: Frontend\n"
        "    icon: web\n"
        "    color: '#3B82F6'\n"
        "    keywords: [React, ' CSS ', react]\n"
        "  - name: Databases\n"
        "    keywords: [sql]\n",
        encoding="utf-8",
    )
    return path
