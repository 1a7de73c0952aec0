"""Check a contact message against the form rules before sending it."""

from __future__ import annotations

import sys

from rich.console import Console

from studytrack.contact import MIN_WORDS, validate_contact
from studytrack.errors import ClientError


def register_subcommands(subparsers) -> None:
    check_parser = subparsers.add_parser("check", help="Validate a contact form submission offline")
    check_parser.add_argument("--name", required=True, help="Sender name")
    check_parser.add_argument("--email", required=True, help="Sender email address")
    check_parser.add_argument(
        "message",
        nargs="*",
        help="Message text. Use '-' to read from stdin.",
    )


def dispatch(args) -> None:
    if args.subcommand == "check":
        _cmd_check(args)
        return
    raise SystemExit(f"Unknown contact subcommand: {args.subcommand}")


def _cmd_check(args, console: Console | None = None) -> None:
    if console is None:
        console = Console()

    tokens = list(args.message or [])
    if tokens == ["-"]:
        message = sys.stdin.read() or ""
    else:
        message = " ".join(tokens)

    try:
        word_count = validate_contact(args.name, args.email, message)
    except ClientError as exc:
        console.print(f"[red]{exc.error}[/red]: {exc.details}", highlight=False)
        raise SystemExit(1) from exc

    console.print(
        f"[green]OK[/green]: {word_count} words (minimum {MIN_WORDS})",
        highlight=False,
    )
