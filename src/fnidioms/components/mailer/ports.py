"""
Mailer component port definitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .component import Mailer


class MailSink(Protocol):
    """
    Terminal action for a finished Mailer.

    Implementations:
    - ConsoleMailSink: writes the mail to stdout (default)
    - DevMailSink: logs and records the mail for test assertions
    """

    def deliver(self, mail: Mailer) -> None:
        """
        Accept a fully-formed mail.

        Notes:
            - One-way: nothing is reported back to the mailer
            - Must not hold on to the Mailer instance itself
        """
        ...
