# studytrack/cli/main.py
import argparse
import sys

from studytrack.cli import api, assistant, contact, logging as logging_cli
from studytrack.cli.env import extract_env_files, load_env_files


def build_parser():
    parser = argparse.ArgumentParser(prog="studytrack", description="Study tracker server toolkit")
    parser.add_argument(
        "--env-file",
        action="append",
        default=[],
        help="Load KEY=value pairs from this file before running (repeatable)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="api control")
    api_subparsers = api_parser.add_subparsers(dest="subcommand", required=True)
    api.register_subcommands(api_subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    assistant_parser = subparsers.add_parser("assistant", help="Study assistant")
    assistant_subparsers = assistant_parser.add_subparsers(dest="subcommand", required=True)
    assistant.register_subcommands(assistant_subparsers)

    contact_parser = subparsers.add_parser("contact", help="Contact form tools")
    contact_subparsers = contact_parser.add_subparsers(dest="subcommand", required=True)
    contact.register_subcommands(contact_subparsers)

    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    # --env-file may follow the subcommand, so strip it before parsing.
    env_files, argv = extract_env_files(argv)
    if env_files:
        load_env_files(env_files)

    args = build_parser().parse_args(argv)

    dispatchers = {
        "api": api.dispatch,
        "logging": logging_cli.dispatch,
        "assistant": assistant.dispatch,
        "contact": contact.dispatch,
    }
    dispatchers[args.command](args)


if __name__ == "__main__":
    main()
