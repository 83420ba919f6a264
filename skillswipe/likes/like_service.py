"""Likes and the student notification inbox."""
import logging
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from skillswipe.persistence.models import Like, Notification, Student

logger = logging.getLogger(__name__)

LIKE_NOTIFICATION_TYPE = "like"


class LikeService:
    """Record employer likes and manage the resulting notifications."""

    def __init__(self, session: Session):
        """
        Initialize like service.

        Args:
            session: Database session
        """
        self.session = session

    def save_like(
        self,
        employer_id: str,
        student_id: str,
        employer_name: str,
    ) -> tuple[Like, Notification]:
        """
        Store a like and notify the liked student.

        Both rows are written in one commit.

        Args:
            employer_id: ID of the employer who liked
            student_id: ID of the liked student
            employer_name: Company name shown in the notification

        Returns:
            The created Like and Notification
        """
        like = Like(
            employer_id=employer_id,
            student_id=student_id,
            employer_name=employer_name,
        )
        notification = Notification(
            recipient_id=student_id,
            sender_id=employer_id,
            sender_name=employer_name,
            type=LIKE_NOTIFICATION_TYPE,
            message=f"{employer_name} is interested in your profile!",
            is_read=False,
        )

        self.session.add_all([like, notification])
        self.session.commit()
        self.session.refresh(like)
        self.session.refresh(notification)

        logger.info("Employer %s liked student %s", employer_id, student_id)
        return like, notification

    def get_notifications(self, student_id: str) -> list[Notification]:
        """Get a student's notifications, newest first."""
        stmt = (
            select(Notification)
            .where(Notification.recipient_id == student_id)
            .order_by(Notification.created_at.desc())
        )
        return list(self.session.execute(stmt).scalars().all())

    def mark_as_read(self, notification_id: str) -> Optional[Notification]:
        """Mark one notification as read. Returns None if not found."""
        notification = self.session.get(Notification, notification_id)
        if notification is None:
            return None

        notification.is_read = True
        self.session.commit()
        return notification

    def mark_all_as_read(self, student_id: str) -> int:
        """Mark all unread notifications of a student as read."""
        result = self.session.execute(
            update(Notification)
            .where(Notification.recipient_id == student_id)
            .where(Notification.is_read.is_(False))
            .values(is_read=True)
        )
        self.session.commit()
        return result.rowcount or 0

    def get_unread_count(self, student_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(Notification.recipient_id == student_id)
            .where(Notification.is_read.is_(False))
        )
        return self.session.execute(stmt).scalar_one()

    def get_employer_likes(self, employer_id: str) -> list[dict]:
        """
        Get the students an employer liked, with their profile data.

        Returns:
            One dict per like; student fields fall back to defaults when the
            student no longer exists
        """
        stmt = (
            select(Like, Student)
            .outerjoin(Student, Like.student_id == Student.id)
            .where(Like.employer_id == employer_id)
            .order_by(Like.created_at.desc())
        )

        liked = []
        for like, student in self.session.execute(stmt).all():
            liked.append({
                "id": like.id,
                "employer_id": like.employer_id,
                "student_id": like.student_id,
                "employer_name": like.employer_name,
                "created_at": like.created_at,
                "student_name": student.name if student else "Unknown",
                "student_email": student.email if student else "",
                "student_study_program": student.study_program if student else "",
                "student_skills": list(student.skills or []) if student else [],
                "student_description": student.description if student else "",
            })
        return liked
