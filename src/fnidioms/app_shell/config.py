import logging
import os
from pathlib import Path

from fnidioms.adapters.console_mail import ConsoleMailSink
from fnidioms.adapters.dev_mail import create_dev_mail_sink
from fnidioms.components.mailer import MailSink
from fnidioms.rules.loader import load_rules
from fnidioms.rules.models import Rules

RULES_ENV_VAR = "FNIDIOMS_RULES"
DEFAULT_RULES_PATH = Path("rules.yaml")

logger = logging.getLogger(__name__)


def resolve_rules_path(explicit: str | None = None) -> Path:
    """
    Pick the rules file: explicit argument, then $FNIDIOMS_RULES,
    then ./rules.yaml.
    """
    if explicit:
        return Path(explicit)
    from_env = os.environ.get(RULES_ENV_VAR)
    if from_env:
        return Path(from_env)
    return DEFAULT_RULES_PATH


def get_rules(explicit: str | None = None) -> Rules:
    """
    Load rules, falling back to defaults when the default file is absent.
    An explicitly requested file that does not exist is an error.
    """
    path = resolve_rules_path(explicit)
    if not path.exists() and path == DEFAULT_RULES_PATH:
        logger.debug("No %s found, using default rules", path)
        return Rules()
    return load_rules(path)


def build_mail_sink(rules: Rules) -> MailSink:
    """Create the mail sink selected by rules.mailer.sink."""
    mailer = rules.mailer
    if mailer.sink == "dev":
        return create_dev_mail_sink(
            log_level=getattr(logging, mailer.log_level),
            log_body=mailer.log_body,
            body_preview_length=mailer.body_preview_length,
        )
    return ConsoleMailSink()
