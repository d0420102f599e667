"""CLI for SecurePass: generate passwords and score their strength."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .config import DEFAULTS, load_config, request_from_config
from .errors import SecurePassError
from .generator import MAX_COUNT, MAX_LENGTH, MIN_COUNT, MIN_LENGTH, generate_many
from .policy import check_policy
from .score import MAX_SCORE, score_password

logger = logging.getLogger(__name__)

# passwords may contain "[...]" or ":name:" sequences; never let rich reinterpret them
out = Console(highlight=False, emoji=False, soft_wrap=True)
err = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        err.print(f"[bold red]Error:[/bold red] {escape(message)}")
        self.print_help(sys.stderr)
        self.exit(1)


def cmd_generate(args) -> int:
    request = request_from_config({
        "length": args.length,
        "lowercase": not args.no_lowercase,
        "uppercase": not args.no_uppercase,
        "numbers": not args.no_numbers,
        "symbols": not args.no_symbols,
    })
    # generate_many validates everything first, so nothing is printed on failure
    passwords = generate_many(args.count, request)
    for i, pw in enumerate(passwords, start=1):
        line = escape(pw)
        if args.count > 1:
            line = f"{i}. {line}"
        if args.strength:
            line += f" [dim]({score_password(pw).label})[/dim]"
        out.print(line)
    return 0


def cmd_check(args) -> int:
    pw = args.check
    result = score_password(pw)
    policy = check_policy(pw)
    header = f"Score: {result.score} / {MAX_SCORE} - {result.label}"
    if policy.is_valid:
        body = "Meets the default composition policy."
    else:
        body = "\n".join(f" • {escape(e)}" for e in policy.errors)
    out.print(Panel(body, title=header))
    return 0


def build_parser(cfg=None) -> argparse.ArgumentParser:
    cfg = cfg if cfg is not None else DEFAULTS
    parser = _Parser(
        prog="securepass",
        description="Generate secure random passwords and rate their strength.",
        allow_abbrev=False,
    )
    parser.add_argument("--length", "-l", type=int, default=cfg["length"],
                        help=f"Password length, {MIN_LENGTH}-{MAX_LENGTH} (default: %(default)s)")
    parser.add_argument("--no-lowercase", action="store_true", default=not cfg["lowercase"],
                        help="Exclude lowercase letters")
    parser.add_argument("--no-uppercase", action="store_true", default=not cfg["uppercase"],
                        help="Exclude uppercase letters")
    parser.add_argument("--no-numbers", action="store_true", default=not cfg["numbers"],
                        help="Exclude numbers")
    parser.add_argument("--no-symbols", action="store_true", default=not cfg["symbols"],
                        help="Exclude symbols")
    parser.add_argument("--count", "-c", type=int, default=cfg["count"],
                        help=f"How many passwords to generate, {MIN_COUNT}-{MAX_COUNT} (default: %(default)s)")
    parser.add_argument("--strength", "-s", action="store_true", default=bool(cfg["strength"]),
                        help="Show the strength tier of each password")
    parser.add_argument("--check", metavar="PASSWORD",
                        help="Score an existing password instead of generating one (wrap in quotes)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    cfg = load_config()
    parser = build_parser(cfg)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

    try:
        if args.check is not None:
            return cmd_check(args)
        return cmd_generate(args)
    except SecurePassError as e:
        logger.debug("command failed: %s", e)
        err.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
