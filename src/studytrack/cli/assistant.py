"""Query the study assistant from the terminal without a running server."""

from __future__ import annotations

import json
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from studytrack.assistant import PROVIDER, AssistantReply, AssistantRequest, generate_reply
from studytrack.errors import ClientError


def register_subcommands(subparsers) -> None:
    ask_parser = subparsers.add_parser("ask", help="Ask the assistant a one-shot question")
    ask_parser.add_argument("--action", choices=["youtube"], default=None, help="Special action to run")
    ask_parser.add_argument("--topic", default=None, help="Topic for --action youtube")
    ask_parser.add_argument("--role", default="student", help="Caller role (accepted, currently unused)")
    ask_parser.add_argument("--json", action="store_true", help="Print the API-shaped JSON payload")
    ask_parser.add_argument(
        "message",
        nargs="*",
        help="Message text. Use '-' to read from stdin, or pipe stdin with no args.",
    )


def dispatch(args) -> None:
    if args.subcommand == "ask":
        _cmd_ask(args)
        return
    raise SystemExit(f"Unknown assistant subcommand: {args.subcommand}")


def _read_message(tokens: list[str]) -> str:
    if tokens:
        if len(tokens) == 1 and tokens[0] == "-":
            return (sys.stdin.read() or "").strip()
        return " ".join(tokens).strip()

    if not sys.stdin.isatty():
        return (sys.stdin.read() or "").strip()
    return ""


def render_reply(reply: AssistantReply, console: Console | None = None) -> None:
    if console is None:
        console = Console()

    console.print(Panel.fit(Text(reply.text), title="Assistant", border_style="cyan"))
    if not reply.links:
        return

    table = Table(title="Links")
    table.add_column("Title", style="bold")
    table.add_column("URL", style="blue", overflow="fold")
    for link in reply.links:
        table.add_row(link.title, link.url)
    console.print(table)


def _cmd_ask(args, console: Console | None = None) -> None:
    request = AssistantRequest(
        message=_read_message(list(args.message or [])),
        action=args.action,
        topic=args.topic,
        user_role=args.role,
    )
    try:
        reply = generate_reply(request)
    except ClientError as exc:
        raise SystemExit(f"{exc.error}: {exc.details}") from exc

    if args.json:
        payload = {"success": True, "reply": reply.text, "links": reply.links_payload(), "provider": PROVIDER}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    render_reply(reply, console=console)
