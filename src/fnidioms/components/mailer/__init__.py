"""
Mailer component - immutable fluent builder DSL.

The Mailer type is exported for annotations only; instances are reachable
solely through the callback given to send().
"""

from .component import (
    Mailer,
    get_default_sink,
    send,
    set_default_sink,
)
from .models import (
    MAIL_FIELDS,
    MailerConstructionError,
    MailerError,
    MailerTransformError,
    MailField,
    UnknownMailFieldError,
    normalize_value,
)
from .ports import MailSink

__all__ = [
    # Entry point
    "send",
    "get_default_sink",
    "set_default_sink",
    # Models
    "Mailer",
    "MailField",
    "MAIL_FIELDS",
    "normalize_value",
    # Errors
    "MailerError",
    "MailerConstructionError",
    "MailerTransformError",
    "UnknownMailFieldError",
    # Ports
    "MailSink",
]
