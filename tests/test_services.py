"""Tests for catalog, profile and like services."""
from datetime import datetime, timedelta

import pytest

from skillswipe.catalog.category_service import CategoryService, load_default_categories
from skillswipe.catalog.exceptions import (
    CatalogError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidCatalogError,
)
from skillswipe.likes.like_service import LikeService
from skillswipe.matching.classifier import SkillCategory
from skillswipe.persistence.models import Notification, SkillCategoryRecord
from skillswipe.profiles.employer_service import EmployerService
from skillswipe.profiles.student_service import StudentService

DEFAULT_NAMES = [
    "Frontend",
    "Backend",
    "Databases",
    "DevOps & Cloud",
    "Data Science & AI",
    "Mobile",
    "Design & UX",
]


class TestCategoryService:
    """Tests for CategoryService."""

    def test_seed_defaults_into_empty_catalog(self, test_db):
        service = CategoryService(test_db)

        written = service.seed_defaults_if_empty()
        categories = service.get_categories()

        assert written == len(DEFAULT_NAMES)
        assert [c.name for c in categories] == DEFAULT_NAMES
        assert [c.order for c in categories] == list(range(len(DEFAULT_NAMES)))
        assert "flutter" in categories[0].keywords

    def test_seed_is_idempotent(self, test_db):
        service = CategoryService(test_db)

        service.seed_defaults_if_empty()
        assert service.seed_defaults_if_empty() == 0
        assert len(service.get_categories()) == len(DEFAULT_NAMES)

    def test_seed_skips_populated_catalog(self, test_db, stored_categories):
        service = CategoryService(test_db)

        assert service.seed_defaults_if_empty() == 0
        assert [c.name for c in service.get_categories()] == ["Frontend", "Databases"]

    def test_seed_from_custom_file(self, test_db, temp_catalog):
        service = CategoryService(test_db)

        assert service.seed_defaults_if_empty(temp_catalog) == 2
        frontend, databases = service.get_categories()
        assert frontend.keywords == ("react", "css")
        assert frontend.icon == "web"
        assert databases.icon == "code"

    def test_get_categories_sorted_by_order(self, test_db):
        test_db.add_all([
            SkillCategoryRecord(name="Late", order=9),
            SkillCategoryRecord(name="Early", order=1),
        ])
        test_db.commit()

        names = [c.name for c in CategoryService(test_db).get_categories()]
        assert names == ["Early", "Late"]

    def test_add_category(self, test_db):
        service = CategoryService(test_db)

        created = service.add_category(
            SkillCategory(name="Security", keywords=(" Pentesting", "OWASP", "owasp"), order=7)
        )

        assert created.id is not None
        assert created.keywords == ("pentesting", "owasp")
        assert service.get_category(created.id) == created

    def test_add_duplicate_category(self, test_db, stored_categories):
        with pytest.raises(DuplicateCategoryError):
            CategoryService(test_db).add_category(SkillCategory(name="Frontend"))

    def test_update_category(self, test_db, stored_categories):
        service = CategoryService(test_db)
        record = stored_categories[1]

        updated = service.update_category(
            SkillCategory(id=record.id, name="Data", keywords=("SQL",), order=4)
        )

        assert updated.name == "Data"
        assert updated.keywords == ("sql",)
        assert test_db.get(SkillCategoryRecord, record.id).order == 4

    def test_update_unknown_category(self, test_db):
        with pytest.raises(CategoryNotFoundError):
            CategoryService(test_db).update_category(SkillCategory(id="missing", name="X"))

    def test_update_rename_onto_existing(self, test_db, stored_categories):
        record = stored_categories[1]
        with pytest.raises(DuplicateCategoryError):
            CategoryService(test_db).update_category(SkillCategory(id=record.id, name="Frontend"))

    def test_add_keyword(self, test_db, stored_categories):
        service = CategoryService(test_db)
        category_id = stored_categories[0].id

        service.add_keyword(category_id, " Vue ")
        result = service.add_keyword(category_id, "vue")

        assert result.keywords == ("react", "css", "vue")

    def test_remove_keyword(self, test_db, stored_categories):
        service = CategoryService(test_db)
        category_id = stored_categories[0].id

        result = service.remove_keyword(category_id, "REACT")
        assert result.keywords == ("css",)

        # Removing again is a no-op
        assert service.remove_keyword(category_id, "react").keywords == ("css",)

    def test_keyword_on_unknown_category(self, test_db):
        with pytest.raises(CatalogError):
            CategoryService(test_db).add_keyword("missing", "go")

    def test_delete_category(self, test_db, stored_categories):
        service = CategoryService(test_db)

        assert service.delete_category(stored_categories[0].id) is True
        assert service.delete_category("missing") is False
        assert [c.name for c in service.get_categories()] == ["Databases"]


class TestLoadDefaultCategories:
    """Tests for reading catalog files."""

    def test_bundled_catalog(self):
        categories = load_default_categories()
        assert [c["name"] for c in categories] == DEFAULT_NAMES

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidCatalogError):
            load_default_categories(tmp_path / "nope.yaml")

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("categories: Frontend\n", encoding="utf-8")

        with pytest.raises(InvalidCatalogError, match="categories"):
            load_default_categories(path)

    def test_category_without_name(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("categories:\n  - keywords: [sql]\n", encoding="utf-8")

        with pytest.raises(InvalidCatalogError):
            load_default_categories(path)

    def test_keywords_not_a_list(self, test_db, tmp_path):
        """A bare string would otherwise be split into one-letter keywords."""
        path = tmp_path / "bad.yaml"
        path.write_text("categories:\n  - name: Databases\n    keywords: sql\n", encoding="utf-8")

        with pytest.raises(InvalidCatalogError, match="must be a list"):
            load_default_categories(path)

        service = CategoryService(test_db)
        with pytest.raises(InvalidCatalogError):
            service.seed_defaults_if_empty(path)
        assert service.get_categories() == []

    def test_category_without_keywords(self, tmp_path):
        path = tmp_path / "ok.yaml"
        path.write_text("categories:\n  - name: Misc\n", encoding="utf-8")

        assert load_default_categories(path) == [{"name": "Misc"}]


class TestStudentService:
    """Tests for StudentService."""

    def test_save_student(self, test_db):
        service = StudentService(test_db)

        student = service.save_student(
            "s-9",
            name="Mia",
            skills=[" Python", "Python", "", "SQL "],
        )

        assert student.skills == ["Python", "SQL"]
        assert service.get_student("s-9").name == "Mia"

    def test_save_student_updates(self, test_db, sample_student):
        service = StudentService(test_db)

        service.save_student(sample_student.id, name="Lena V.", skills=["Kotlin"])

        student = service.get_student(sample_student.id)
        assert student.name == "Lena V."
        assert student.skills == ["Kotlin"]
        assert len(service.get_all_students()) == 1

    def test_get_all_skills(self, test_db, multiple_students):
        skills = StudentService(test_db).get_all_skills()

        assert skills == sorted(skills)
        assert set(skills) == {
            "Python", "SQL", "Docker", "React", "CSS", "python", "Machine Learning",
        }

    def test_get_all_skills_empty(self, test_db):
        assert StudentService(test_db).get_all_skills() == []

    def test_get_students_by_skills(self, test_db, multiple_students):
        service = StudentService(test_db)

        names = [s.name for s in service.get_students_by_skills(["Python", "CSS"])]

        assert names == ["Ada", "Ben"]
        assert service.get_students_by_skills([]) == []


class TestEmployerService:
    """Tests for EmployerService."""

    def test_save_and_update_employer(self, test_db):
        service = EmployerService(test_db)

        service.save_employer("e-1", company_name="Acme", location="Berlin")
        service.save_employer("e-1", company_name="Acme AG", location="Berlin")

        employer = service.get_employer("e-1")
        assert employer.company_name == "Acme AG"
        assert employer.location == "Berlin"

    def test_get_unknown_employer(self, test_db):
        assert EmployerService(test_db).get_employer("nope") is None


class TestLikeService:
    """Tests for LikeService."""

    def test_save_like_creates_notification(self, test_db, sample_student, sample_employer):
        service = LikeService(test_db)

        like, notification = service.save_like(
            sample_employer.id, sample_student.id, sample_employer.company_name
        )

        assert like.id is not None
        assert notification.recipient_id == sample_student.id
        assert notification.type == "like"
        assert notification.message == "Nordlicht GmbH is interested in your profile!"
        assert notification.is_read is False
        assert service.get_unread_count(sample_student.id) == 1

    def test_get_notifications_newest_first(self, test_db):
        now = datetime(2026, 3, 1, 12, 0)
        test_db.add_all([
            Notification(id="old", recipient_id="s-1", sender_id="e-1", created_at=now - timedelta(days=1)),
            Notification(id="new", recipient_id="s-1", sender_id="e-2", created_at=now),
            Notification(id="other", recipient_id="s-2", sender_id="e-1", created_at=now),
        ])
        test_db.commit()

        ids = [n.id for n in LikeService(test_db).get_notifications("s-1")]
        assert ids == ["new", "old"]

    def test_mark_as_read(self, test_db, sample_student, sample_employer):
        service = LikeService(test_db)
        _, notification = service.save_like(sample_employer.id, sample_student.id, "Nordlicht GmbH")

        updated = service.mark_as_read(notification.id)

        assert updated.is_read is True
        assert service.get_unread_count(sample_student.id) == 0
        assert service.mark_as_read("missing") is None

    def test_mark_all_as_read(self, test_db, sample_student):
        service = LikeService(test_db)
        service.save_like("e-1", sample_student.id, "Acme")
        service.save_like("e-2", sample_student.id, "Globex")
        service.save_like("e-1", "someone-else", "Acme")

        assert service.mark_all_as_read(sample_student.id) == 2
        assert service.get_unread_count(sample_student.id) == 0
        assert service.get_unread_count("someone-else") == 1

    def test_get_employer_likes(self, test_db, sample_student, sample_employer):
        service = LikeService(test_db)
        service.save_like(sample_employer.id, sample_student.id, "Nordlicht GmbH")
        service.save_like(sample_employer.id, "deleted-student", "Nordlicht GmbH")

        liked = {entry["student_id"]: entry for entry in service.get_employer_likes(sample_employer.id)}

        assert liked[sample_student.id]["student_name"] == "Lena Vogt"
        assert liked[sample_student.id]["student_skills"] == ["Flutter", "Dart", "Firebase"]
        assert liked["deleted-student"]["student_name"] == "Unknown"
        assert service.get_employer_likes("nobody") == []
