"""
Dev Mail Sink.

Logs mail instead of printing it. Used for local development and tests.

Key behaviors:
- Logs mail details through the module logger
- Records a plain snapshot of each mail for test assertions
  (never the Mailer instance itself)
- Supports configurable verbosity
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from fnidioms.components.mailer.component import Mailer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentMail:
    """Record of a delivered mail for test assertions."""

    id: str
    sender: str
    recipient: str
    subject: str
    body: str
    logged_at: datetime


@dataclass
class DevMailSink:
    """
    Dev mail sink that logs instead of printing.

    Mails are logged and stored in memory as SentMail snapshots.

    Implements MailSink protocol.
    """

    # In-memory storage for test assertions
    sent_mails: list[SentMail] = field(default_factory=list)

    # Configuration
    log_level: int = logging.INFO
    log_body: bool = True  # Whether to log body content
    body_preview_length: int = 100  # Max chars of body to log

    def deliver(self, mail: Mailer) -> None:
        """
        Log and record a mail.

        Args:
            mail: Finished Mailer handed over by send()
        """
        fields = mail.as_dict()
        sent = SentMail(
            id=f"dev-{uuid4().hex[:12]}",
            sender=fields["from"],
            recipient=fields["to"],
            subject=fields["subject"],
            body=fields["body"],
            logged_at=datetime.now(UTC),
        )
        self.sent_mails.append(sent)
        self._log_mail(sent)

    def _log_mail(self, sent: SentMail) -> None:
        """Log mail details."""
        parts = [
            f"MAIL (dev): From={sent.sender}",
            f"To={sent.recipient}",
            f"Subject={sent.subject}",
        ]

        if self.log_body and sent.body:
            preview = sent.body[: self.body_preview_length]
            if len(sent.body) > self.body_preview_length:
                preview += "..."
            parts.append(f"Body={preview}")

        parts.append(f"MessageID={sent.id}")

        logger.log(self.log_level, ", ".join(parts))

    # --- Test Helper Methods ---

    def get_last_mail(self) -> SentMail | None:
        """Get the most recently delivered mail."""
        return self.sent_mails[-1] if self.sent_mails else None

    def get_mails_to(self, recipient: str) -> list[SentMail]:
        """Get all mails delivered to a specific recipient."""
        return [m for m in self.sent_mails if m.recipient == recipient]

    def clear(self) -> None:
        """Clear all stored mails (for test isolation)."""
        self.sent_mails.clear()

    @property
    def mail_count(self) -> int:
        return len(self.sent_mails)


# --- Factory Function ---


def create_dev_mail_sink(
    log_level: int = logging.INFO,
    log_body: bool = True,
    body_preview_length: int = 100,
) -> DevMailSink:
    """
    Create a dev mail sink.

    Args:
        log_level: Logging level for mail logs
        log_body: Whether to log body content
        body_preview_length: Max chars of body to preview

    Returns:
        Configured DevMailSink
    """
    return DevMailSink(
        log_level=log_level,
        log_body=log_body,
        body_preview_length=body_preview_length,
    )
