"""CLI for passcraft: generate, score, policy (show/reset)."""

import argparse
import logging
from dataclasses import replace

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import load_config, load_policy, save_policy
from .evaluator import score_password
from .generator import generate
from .policy import DEFAULT_POLICY, normalize
from .suggestions import suggest_improvements

console = Console()
log = logging.getLogger(__name__)

_OVERRIDES = {
    "upper": "include_uppercase",
    "lower": "include_lowercase",
    "numbers": "include_numbers",
    "symbols": "include_symbols",
}


MIN_LENGTH = 4
MAX_LENGTH = 128


def _length(value: str) -> int:
    """argparse type for --length, bounded like the generator controls."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}")
    if not MIN_LENGTH <= n <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {n}")
    return n


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _policy_table(policy) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("Length", str(policy.length))
    for name, enabled in policy.flags().items():
        table.add_row(name.capitalize(), "[green]on[/green]" if enabled else "[red]off[/red]")
    return table


def cmd_generate(args):
    policy = load_policy()
    if args.length is not None:
        policy = replace(policy, length=args.length)
    for opt, attr in _OVERRIDES.items():
        value = getattr(args, opt)
        if value is not None:
            policy = replace(policy, **{attr: value})
    policy = normalize(policy)
    log.debug("generating with %s", policy)

    copies = args.copies if args.copies is not None else load_config()["copies"]
    for i in range(copies):
        pw = generate(policy)
        console.print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}",
                      soft_wrap=True, emoji=False, highlight=False)
        if args.show_strength:
            result = score_password(pw)
            console.print(f"  Strength: {result.label} ({result.score}/100)")

    if args.save:
        try:
            save_policy(policy)
        except OSError as e:
            console.print(f"[red]Failed to save settings: {escape(str(e))}[/red]")
            return 1
        console.print("[green]Policy saved.[/green]")
    return 0


def cmd_score(args):
    result = score_password(args.password)
    header = f"Score: {result.score} / 100 — {result.label}"
    if result.feedback:
        body = "\n".join(f" • {escape(s)}" for s in result.feedback)
    else:
        body = "No suggestions, this password covers every check."
    console.print(Panel(body, title=header))

    sugg = suggest_improvements(args.password, examples=args.examples)
    if sugg["examples"] and result.feedback:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Example stronger password")
        for ex in sugg["examples"]:
            table.add_row(Text(ex))
        console.print(table)
    return 0


def cmd_policy_show(args):
    console.print(_policy_table(load_policy()))
    return 0


def cmd_policy_reset(args):
    try:
        save_policy(DEFAULT_POLICY)
    except OSError as e:
        console.print(f"[red]Failed to save settings: {escape(str(e))}[/red]")
        return 1
    console.print("[green]Policy reset to defaults.[/green]")
    console.print(_policy_table(DEFAULT_POLICY))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=_length, help="Password length (default: saved policy)")
    gen.add_argument("--upper", action=argparse.BooleanOptionalAction, help="Uppercase letters")
    gen.add_argument("--lower", action=argparse.BooleanOptionalAction, help="Lowercase letters")
    gen.add_argument("--numbers", action=argparse.BooleanOptionalAction, help="Digits")
    gen.add_argument("--symbols", action=argparse.BooleanOptionalAction, help="Symbols")
    gen.add_argument("--copies", type=int, help="How many passwords to generate")
    gen.add_argument("--save", action="store_true", help="Remember this policy for next time")
    gen.add_argument("--show-strength", action="store_true", help="Score each generated password")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--examples", type=int, default=1, help="How many example passwords to show")
    sc.set_defaults(func=cmd_score)

    p = sub.add_parser("policy", help="Saved policy operations")
    psub = p.add_subparsers(dest="pcmd", required=True)

    p_show = psub.add_parser("show", help="Show the saved policy")
    p_show.set_defaults(func=cmd_policy_show)

    p_reset = psub.add_parser("reset", help="Restore the default policy")
    p_reset.set_defaults(func=cmd_policy_reset)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
