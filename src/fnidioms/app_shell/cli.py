import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from fnidioms.app_shell.config import build_mail_sink, get_rules
from fnidioms.app_shell.schemas import ExpenseRecords
from fnidioms.components.colors import FILTER_NAMES, Camera, Color, ColorError, filter_chain
from fnidioms.components.converters import CONVERTER_SPECS, ConverterError, get_converter
from fnidioms.components.expenses import ExpenseError, group_tags_by_year
from fnidioms.components.mailer import send, set_default_sink
from fnidioms.rules.models import Rules

logger = logging.getLogger("cli")


def handle_mail(rules: Rules, args: argparse.Namespace) -> None:
    previous = set_default_sink(build_mail_sink(rules))
    try:
        send(
            lambda mail: mail.from_(args.sender)
            .to(args.recipient)
            .subject(args.subject)
            .body(args.body)
        )
    finally:
        set_default_sink(previous)


def handle_convert(rules: Rules, args: argparse.Namespace) -> None:
    try:
        converter = get_converter(args.name)
    except ConverterError as e:
        logger.error(str(e))
        sys.exit(1)

    result = converter(args.value)
    print(f"{result:.{rules.converters.precision}f}")


def handle_color(rules: Rules, args: argparse.Namespace) -> None:
    try:
        camera = Camera(*filter_chain(args.filters, modifier=args.modifier))
        color = camera.snap(Color(args.red, args.green, args.blue))
    except ColorError as e:
        logger.error(str(e))
        sys.exit(1)

    print(f"{color.red} {color.green} {color.blue} {color.to_hex()}")


def handle_expenses(rules: Rules, args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.exists():
        logger.error(f"Expenses file {path} not found.")
        sys.exit(1)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        records = ExpenseRecords.validate_python(data or [])
        expenses = [record.to_expense() for record in records]
    except OSError as e:
        logger.error(f"Cannot read expenses file {path}: {e}")
        sys.exit(1)
    except (yaml.YAMLError, UnicodeDecodeError, ValidationError, ExpenseError) as e:
        logger.error(f"Invalid expenses file {path}: {e}")
        sys.exit(1)

    grouped = group_tags_by_year(expenses)
    for year in sorted(grouped):
        print(f"{year}: {', '.join(sorted(grouped[year]))}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fnidioms", description="Functional idioms CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $FNIDIOMS_RULES or ./rules.yaml)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # mail
    mail_parser = subparsers.add_parser("mail", help="Build and send a mail")
    mail_parser.add_argument("--from", dest="sender", default="", help="Sender address")
    mail_parser.add_argument("--to", dest="recipient", default="", help="Recipient address")
    mail_parser.add_argument("--subject", default="", help="Subject line")
    mail_parser.add_argument("--body", default="", help="Body text")

    # convert
    names = ", ".join(f"{spec.name} ({spec.description})" for spec in CONVERTER_SPECS)
    convert_parser = subparsers.add_parser("convert", help="Convert a value between units")
    convert_parser.add_argument("name", help=f"Converter name: {names}")
    convert_parser.add_argument("value", type=float, help="Value to convert")

    # color
    color_parser = subparsers.add_parser("color", help="Run a colour through filters")
    color_parser.add_argument("red", type=int)
    color_parser.add_argument("green", type=int)
    color_parser.add_argument("blue", type=int)
    color_parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        help=f"Filter to apply, repeatable ({', '.join(FILTER_NAMES)})",
    )
    color_parser.add_argument("--modifier", type=int, default=10, help="Brighten/darken amount")

    # expenses
    expenses_parser = subparsers.add_parser("expenses", help="Group expense tags by year")
    expenses_parser.add_argument("file", help="YAML list of {year, amount, tags}")

    return parser


HANDLERS = {
    "mail": handle_mail,
    "convert": handle_convert,
    "color": handle_color,
    "expenses": handle_expenses,
}


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        rules = get_rules(args.rules)
    except (OSError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=getattr(logging, rules.logging.level))
    HANDLERS[args.command](rules, args)


if __name__ == "__main__":
    main()
