"""
Mailer component field names and error types.
"""

from __future__ import annotations

from typing import Literal

# --- Types ---

MailField = Literal["from", "to", "subject", "body"]

# Order is the rendering order used by sinks
MAIL_FIELDS: tuple[MailField, ...] = ("from", "to", "subject", "body")


def normalize_value(value: object) -> str:
    """Collapse None, empty and non-string input to ""."""
    if isinstance(value, str):
        return value
    return ""


# --- Error Types ---


class MailerError(Exception):
    """Base exception for mailer programming errors."""

    pass


class MailerConstructionError(MailerError, TypeError):
    """A Mailer was instantiated outside the send() chain."""

    def __init__(self) -> None:
        super().__init__(
            "Mailer has no public constructor; use send(lambda mailer: ...) instead"
        )


class UnknownMailFieldError(MailerError, KeyError):
    """Field name is not one of MAIL_FIELDS."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unknown mail field {name!r}; expected one of {', '.join(MAIL_FIELDS)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MailerTransformError(MailerError, TypeError):
    """The callback passed to send() did not return a Mailer."""

    def __init__(self, returned: object) -> None:
        self.returned = returned
        super().__init__(
            f"send() callback must return a Mailer, got {type(returned).__name__}"
        )
