import argparse
import json
import logging
from dataclasses import asdict
from datetime import datetime

from quickadd.config import settings


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _reference_time(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {value!r}") from None


def _to_json(data: dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def parse_command(args: argparse.Namespace) -> None:
    from quickadd.services.drafts import build_task_draft
    from quickadd.services.parser import QuickEntryParser

    parser = QuickEntryParser(timezone=args.timezone)
    result = parser.parse(args.text, now=args.now)

    if args.draft:
        print(build_task_draft(result, now=args.now).model_dump_json(indent=2))
    else:
        print(_to_json(asdict(result)))


def simple_command(args: argparse.Namespace) -> None:
    from quickadd.services.simple_parser import parse_simple

    print(_to_json(asdict(parse_simple(args.text, now=args.now))))


def cheatsheet_command() -> None:
    from quickadd.services.cheatsheet import get_cheat_sheet

    print("Shortcuts & Befehle\n")
    for line in get_cheat_sheet():
        print(f"  {line}")


def check_config() -> None:
    from quickadd.services.timezone import TimezoneService

    print("Quick-Add Configuration Check\n")

    service = TimezoneService()
    checks = [
        ("User timezone", settings.user_timezone, service.default_timezone == settings.user_timezone),
        ("Log level", settings.log_level, hasattr(logging, settings.log_level.upper())),
        ("Default category", settings.default_category, True),
        ("Default stake", f"{settings.default_stake:.2f}", settings.has_default_stake),
    ]

    for name, value, ok in checks:
        symbol = "+" if ok else "-"
        print(f"  [{symbol}] {name}: {value}")

    if service.default_timezone != settings.user_timezone:
        print("\nUnknown USER_TIMEZONE, parsing falls back to UTC.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Quick-add parser for tasks and events")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a quick-add line")
    parse_parser.add_argument("text", help="Quick-add input, e.g. 'morgen 10 uhr Meeting with Max'")
    parse_parser.add_argument("--now", type=_reference_time, help="Reference time (ISO 8601)")
    parse_parser.add_argument("--timezone", help="IANA timezone (defaults to USER_TIMEZONE)")
    parse_parser.add_argument("--draft", action="store_true", help="Print the task creation payload")

    simple_parser = subparsers.add_parser("simple", help="Parse with the plain quick-add parser")
    simple_parser.add_argument("text", help="Quick-add input, e.g. 'Pay rent tomorrow $20'")
    simple_parser.add_argument("--now", type=_reference_time, help="Reference time (ISO 8601)")

    subparsers.add_parser("cheatsheet", help="Show the shortcut cheat sheet")
    subparsers.add_parser("check", help="Check configuration")

    args = parser.parse_args()

    setup_logging()

    if args.command == "parse":
        parse_command(args)
    elif args.command == "simple":
        simple_command(args)
    elif args.command == "cheatsheet":
        cheatsheet_command()
    elif args.command == "check":
        check_config()
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
