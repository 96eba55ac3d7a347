"""
Mailer component - immutable fluent builder with hidden construction.

A Mailer cannot be created by callers. The only way to get one is the
callback handed to send(), which receives a fresh empty seed, chains
with_field() calls on it and returns the finished value:

    send(lambda mail: mail.from_("a@example.com").to("b@example.com"))

send() then passes that value to the terminal sink and drops it.

Invariants:
- Mailer instances are frozen; every transformation returns a new instance
- No field is ever None; None, empty or non-string input becomes ""
- The empty seed is created once at import and never exported
- Calling Mailer(...) outside this module raises MailerConstructionError
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import InitVar, dataclass, replace

from fnidioms.adapters.console_mail import ConsoleMailSink

from .models import (
    MAIL_FIELDS,
    MailerConstructionError,
    MailerTransformError,
    MailField,
    UnknownMailFieldError,
    normalize_value,
)
from .ports import MailSink

logger = logging.getLogger(__name__)

# Construction token; only code in this module can pass it
_SEAL = object()


@dataclass(frozen=True, repr=False)
class Mailer:
    """
    Mail configuration value built inside send().

    Fields are addressed by name (see MAIL_FIELDS). Equality is structural.
    """

    _values: tuple[str, ...]
    _seal: InitVar[object] = None

    def __post_init__(self, _seal: object) -> None:
        if _seal is not _SEAL:
            raise MailerConstructionError()
        object.__setattr__(
            self, "_values", tuple(normalize_value(v) for v in self._values)
        )

    # --- Transformations ---

    def with_field(self, name: MailField, value: str | None) -> Mailer:
        """Return a copy with `name` set to the normalized `value`."""
        index = _field_index(name)
        values = list(self._values)
        values[index] = normalize_value(value)
        return replace(self, _values=tuple(values), _seal=_SEAL)

    def from_(self, address: str | None) -> Mailer:
        return self.with_field("from", address)

    def to(self, address: str | None) -> Mailer:
        return self.with_field("to", address)

    def subject(self, text: str | None) -> Mailer:
        return self.with_field("subject", text)

    def body(self, text: str | None) -> Mailer:
        return self.with_field("body", text)

    # --- Inspection ---

    def get(self, name: MailField) -> str:
        return self._values[_field_index(name)]

    def as_dict(self) -> dict[str, str]:
        """Snapshot of all fields keyed by field name."""
        return dict(zip(MAIL_FIELDS, self._values))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.as_dict().items())
        return f"Mailer({fields})"


def _field_index(name: str) -> int:
    try:
        return MAIL_FIELDS.index(name)  # type: ignore[arg-type]
    except ValueError:
        raise UnknownMailFieldError(name) from None


_EMPTY = Mailer(tuple("" for _ in MAIL_FIELDS), _SEAL)

_default_sink: MailSink = ConsoleMailSink()


# --- Default Sink ---


def get_default_sink() -> MailSink:
    """Sink used by send() when none is given."""
    return _default_sink


def set_default_sink(sink: MailSink) -> MailSink:
    """
    Replace the default sink.

    Args:
        sink: New terminal sink

    Returns:
        The previously installed sink, so callers can restore it
    """
    global _default_sink
    previous = _default_sink
    _default_sink = sink
    logger.debug("Default mail sink set to %s", type(sink).__name__)
    return previous


# --- Entry Point ---


def send(
    transform: Callable[[Mailer], Mailer],
    sink: MailSink | None = None,
) -> None:
    """
    Build a mail from the empty seed and deliver it.

    Args:
        transform: Receives the empty seed and returns the finished Mailer
        sink: Terminal action; defaults to get_default_sink()

    Raises:
        MailerTransformError: If transform does not return a Mailer
    """
    mail = transform(_EMPTY)
    if not isinstance(mail, Mailer):
        raise MailerTransformError(mail)

    target = sink if sink is not None else _default_sink
    logger.debug("Delivering mail via %s", type(target).__name__)
    target.deliver(mail)
