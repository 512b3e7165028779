"""
Command-line entry points for shellbox.

``shellbox <command>`` exposes every utility as a subcommand. The commands
that used to be shell functions (``parseurl``, ``murder``, ``timer``,
``nato``, ``cal``) are also installed as standalone console scripts.
"""
import argparse
import datetime
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from shellbox import __version__
from shellbox.core.config import Settings, load_settings
from shellbox.core.errors import ParseError, SignalPermissionError
from shellbox.core.log import configure_logging
from shellbox.core.notification import Notifier
from shellbox.process.terminator import ProcessTerminator, TerminationOutcome
from shellbox.text.phonetic import spell
from shellbox.timing.calendar_view import render_month
from shellbox.timing.countdown import countdown
from shellbox.web.url_parts import parse_url, print_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def cmd_parseurl(args, settings: Settings, console: Console) -> int:
    try:
        parts = parse_url(args.url)
    except ParseError as e:
        logger.error(e.describe())
        console.print(f"[bold red]Error: {escape(e.describe())}[/bold red]")
        return EXIT_FAILURE
    print_report(parts, console)
    return EXIT_OK


def cmd_murder(args, settings: Settings, console: Console) -> int:
    grace = settings.process.grace_period if args.grace is None else args.grace
    terminator = ProcessTerminator(grace_period=grace)
    try:
        result = terminator.terminate(args.target)
    except SignalPermissionError as e:
        logger.error(e.describe())
        console.print(f"[bold red]Error: {escape(e.describe())}[/bold red]")
        return EXIT_FAILURE

    if result.outcome == TerminationOutcome.NOT_FOUND:
        console.print(f"[yellow]murder: no running process matches '{escape(args.target)}'[/yellow]")
        return EXIT_FAILURE
    if result.outcome == TerminationOutcome.GRACEFUL_EXIT:
        console.print(f"[green]'{escape(args.target)}' exited gracefully (pids {result.pids})[/green]")
        return EXIT_OK
    if result.outcome == TerminationOutcome.FORCE_KILLED:
        console.print(f"[green]'{escape(args.target)}' was force killed (pids {result.pids})[/green]")
        return EXIT_OK
    if result.outcome == TerminationOutcome.INTERRUPTED:
        console.print(f"[yellow]murder: interrupted, still running: {result.survivors}[/yellow]")
        return EXIT_INTERRUPTED

    console.print(f"[bold red]murder failed: '{escape(args.target)}' still running after forced kill "
                  f"(pids {result.survivors})[/bold red]")
    return EXIT_FAILURE


def cmd_timer(args, settings: Settings, console: Console) -> int:
    notifier = Notifier.from_settings(settings.timer, console=console)
    countdown(args.minutes, notifier=notifier, interval=settings.timer.interval_seconds)
    return EXIT_OK


def cmd_nato(args, settings: Settings, console: Console) -> int:
    text = " ".join(args.text)
    for char, word in zip(text, spell(text)):
        console.print(f"[bold]{escape(char) if not char.isspace() else ' '}[/bold]  {escape(word)}")
    return EXIT_OK


def cmd_cal(args, settings: Settings, console: Console) -> int:
    console.print(render_month(args.year, args.month, first_weekday=args.first_weekday))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shellbox", description="Small command-line utilities from a shell profile.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", dest="config", default=None, help="Path to a YAML config file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("parseurl", help="Break a URL into its components.")
    p.add_argument("url", help="The URL to decompose.")
    p.set_defaults(handler=cmd_parseurl)

    p = subparsers.add_parser("murder", help="Terminate a process by PID or name, forcing it if needed.")
    p.add_argument("target", help="A PID or a process name.")
    p.add_argument("-g", "--grace", dest="grace", type=float, default=None,
                   help="Seconds to wait before forcing the kill (default from config, 10).")
    p.set_defaults(handler=cmd_murder)

    p = subparsers.add_parser("timer", help="Count down a number of minutes.")
    p.add_argument("minutes", type=int, help="Minutes to count down.")
    p.set_defaults(handler=cmd_timer)

    p = subparsers.add_parser("nato", help="Spell text with the NATO phonetic alphabet.")
    p.add_argument("text", nargs="+", help="Text to spell.")
    p.set_defaults(handler=cmd_nato)

    today = datetime.date.today()
    p = subparsers.add_parser("cal", help="Print a month calendar.")
    p.add_argument("year", nargs="?", type=int, default=today.year, help="Year (default: current).")
    p.add_argument("month", nargs="?", type=int, default=today.month, help="Month 1-12 (default: current).")
    p.add_argument("--first-weekday", dest="first_weekday", type=int, default=0,
                   help="First day of the week, 0=Monday .. 6=Sunday.")
    p.set_defaults(handler=cmd_cal, validate=_validate_cal)

    return parser


def _validate_cal(parser: argparse.ArgumentParser, args) -> None:
    if not 1 <= args.month <= 12:
        parser.error(f"month must be between 1 and 12, got {args.month}")
    if not 0 <= args.first_weekday <= 6:
        parser.error(f"first weekday must be between 0 and 6, got {args.first_weekday}")


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    validate = getattr(args, "validate", None)
    if validate:
        validate(parser, args)

    settings = load_settings(args.config)
    configure_logging("DEBUG" if args.verbose else settings.logging.level, settings.logging.log_file)
    console = console or Console()

    try:
        return args.handler(args, settings, console)
    except KeyboardInterrupt:
        logger.warning(f"{args.command} interrupted by user")
        return EXIT_INTERRUPTED


def _run_single(command: str) -> None:
    sys.exit(main([command, *sys.argv[1:]]))


def parseurl_main() -> None:
    _run_single("parseurl")


def murder_main() -> None:
    _run_single("murder")


def timer_main() -> None:
    _run_single("timer")


def nato_main() -> None:
    _run_single("nato")


def cal_main() -> None:
    _run_single("cal")


if __name__ == "__main__":
    sys.exit(main())
