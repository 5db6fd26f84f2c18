#!/usr/bin/env python3
"""
greeting — Print a friendly greeting, as plain text or JSON.

Usage:
  python greeting.py
  python greeting.py --user Alice
  python greeting.py -u Bob --json
"""

import json
import sys
from collections import namedtuple

import click

PROG = "greeting"
DESCRIPTION = "A simple greeting application"
DEFAULT_USER = "World"

# Raised for unknown options, missing option values and stray arguments.
# click's NoSuchOption, BadOptionUsage, etc. all derive from it.
ArgumentError = click.UsageError

Config = namedtuple(
    "Config", ["user_name", "json_output"], defaults=(DEFAULT_USER, False),
)


# ── Utility ───────────────────────────────────────────────────────────

def die(msg, code=1):
    print(f"\n  ERROR: {msg}", file=sys.stderr)
    sys.exit(code)


# ── Argument parsing ──────────────────────────────────────────────────

@click.command(name=PROG, help=DESCRIPTION)
@click.option(
    "-u", "--user", default=DEFAULT_USER, show_default=True, metavar="NAME",
    help="Name to greet",
)
@click.option(
    "--json", "json_output", is_flag=True, default=False,
    help="Emit JSON instead of plain text",
)
def cli(user, json_output):
    return Config(user_name=user, json_output=json_output)


def parse_args(args=None):
    """Parse command-line arguments (without the program name) into a Config.

    Raises ArgumentError on malformed input. A --help request prints the
    help text and raises click's Exit with status 0.
    """
    if args is None:
        args = sys.argv[1:]
    with cli.make_context(PROG, list(args)) as ctx:
        return cli.invoke(ctx)


# ── Formatting ────────────────────────────────────────────────────────

def greeting_text(user_name):
    return f"Hello, {user_name}!"


def format_greeting(config):
    """Render the greeting for a Config, as plain text or a JSON object."""
    message = greeting_text(config.user_name)
    if config.json_output:
        return json.dumps({"message": message}, ensure_ascii=False)
    return message


# ── CLI ──────────────────────────────────────────────────────────────

def main(args=None):
    try:
        config = parse_args(args)
    except ArgumentError as e:
        # Option-value errors are raised before a context is attached.
        ctx = e.ctx or click.Context(cli, info_name=PROG)
        click.echo(ctx.get_usage(), err=True)
        die(e.format_message(), code=2)
    except click.exceptions.Exit as e:
        sys.exit(e.exit_code)

    click.echo(format_greeting(config))


if __name__ == "__main__":
    main()
