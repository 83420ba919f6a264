"""Slack notifications for new likes."""
import logging
from typing import Optional

import aiohttp

from skillswipe.matching.match_score import MatchResult
from skillswipe.persistence.models import Notification

logger = logging.getLogger(__name__)


class LikeNotifier:
    """Forward like notifications to Slack via webhook."""

    def __init__(self, webhook_url: Optional[str] = None, timeout: float = 10):
        """
        Initialize like notifier.

        Args:
            webhook_url: Slack incoming webhook URL (disabled when empty)
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def notify(
        self,
        notification: Notification,
        match_result: Optional[MatchResult] = None,
    ) -> bool:
        """
        Send a single like notification.

        Args:
            notification: Stored notification to forward
            match_result: Optional match details to include

        Returns:
            True if Slack accepted the message
        """
        if not self.webhook_url:
            logger.info("Slack webhook not configured")
            return False

        payload = self._build_payload(notification, match_result)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.webhook_url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        logger.warning("Slack returned HTTP %d", response.status)
                    return response.status == 200

        except Exception as e:
            logger.error("Slack notification error: %s", e)
            return False

    def _build_payload(
        self,
        notification: Notification,
        match_result: Optional[MatchResult] = None,
    ) -> dict:
        """Build Slack message payload for a notification."""
        blocks = [
            {
                "type": "header",
                "text": {
                    "type": "plain_text",
                    "text": f"New like from {notification.sender_name}",
                    "emoji": True,
                },
            },
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": notification.message},
            },
        ]

        if match_result is not None and match_result.is_filtered:
            matched = ", ".join(match_result.matched_skills[:8]) or "none"
            blocks.append(
                {
                    "type": "section",
                    "fields": [
                        {
                            "type": "mrkdwn",
                            "text": f"*Match:*\n{match_result.percentage}% ({match_result.label})",
                        },
                        {"type": "mrkdwn", "text": f"*Matched skills:*\n{matched}"},
                    ],
                }
            )

        return {"text": notification.message, "blocks": blocks}
