"""Employer likes and student notifications."""
from .like_service import LIKE_NOTIFICATION_TYPE, LikeService

__all__ = ["LikeService", "LIKE_NOTIFICATION_TYPE"]
