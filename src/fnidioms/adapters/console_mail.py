"""
Console Mail Sink.

Default terminal action for mailer.send(): writes each mail to stdout
as header-style lines followed by a blank line.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from fnidioms.components.mailer.component import Mailer


def render_mail(mail: Mailer) -> str:
    """Render a mail as `Field: value` lines."""
    return "\n".join(
        f"{name.capitalize()}: {value}" for name, value in mail.as_dict().items()
    )


@dataclass
class ConsoleMailSink:
    """
    Writes mail to a text stream.

    Implements MailSink protocol. The stream defaults to the current
    sys.stdout at delivery time.
    """

    stream: TextIO | None = None

    def deliver(self, mail: Mailer) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(render_mail(mail) + "\n\n")
        out.flush()
