"""Outbound notification sinks."""
from .like_notifier import LikeNotifier

__all__ = ["LikeNotifier"]
