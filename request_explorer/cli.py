"""Command-line entry point for request_explorer."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen.cli_integration import (
    CLIError,
    add_request_input_args,
    create_codegen_subparser,
    create_languages_subparser,
    get_request_input,
    load_environment,
)
from .config import AppConfig, ConfigError, load_config
from .history import HistoryError, HistoryStore
from .logging_config import get_logger, setup_logging
from .request_service import RequestService, RequestServiceError

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


class CLIHandler:
    """Handle the ``send`` and ``history`` subcommands."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        logger.debug("CLIHandler initialized")

    def _history_file(self, args: argparse.Namespace) -> str | None:
        return getattr(args, "history_file", None) or self.config.history_file

    def _load_history(self, args: argparse.Namespace) -> HistoryStore | None:
        history_file = self._history_file(args)
        if not history_file:
            return None
        return HistoryStore.load(history_file, self.config.max_history_items)

    def send(self, args: argparse.Namespace) -> int:
        """Send the request and print the response.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        item = get_request_input(args)
        environment = load_environment(args, self.config)
        history = self._load_history(args)

        service = RequestService(
            environment=environment,
            timeout_ms=self.config.timeout_ms if args.timeout is None else args.timeout,
            history=history,
        )

        try:
            result = service.send_request_item(item)
        except RequestServiceError as e:
            err_console.print(f"❌ [red]{e}[/red]")
            return 1
        finally:
            if history is not None:
                history.save(self._history_file(args))

        style = "green" if result.ok else "red"
        console.print(
            f"[{style}]{result.status} {result.status_text}[/{style}] "
            f"[dim]({result.elapsed_ms:.0f} ms)[/dim]"
        )

        if args.include_headers:
            table = Table(box=box.SIMPLE, show_header=False)
            table.add_column("Header", style="bold")
            table.add_column("Value")
            for key, value in result.headers.items():
                table.add_row(key, value)
            console.print(table)

        content_type = next(
            (value for key, value in result.headers.items() if key.lower() == "content-type"),
            "",
        )
        if "json" in content_type.lower():
            console.print(Syntax(result.body, "json", theme="monokai", word_wrap=True))
        else:
            console.print(result.body, markup=False, highlight=False)

        return 0 if result.ok else 1

    def history(self, args: argparse.Namespace) -> int:
        """List, search or clear the request history."""
        history_file = self._history_file(args)
        if not history_file:
            err_console.print("❌ [red]No history file configured (use --history-file)[/red]")
            return 1

        store = HistoryStore.load(history_file, self.config.max_history_items)

        if args.clear:
            store.clear_history()
            store.save(history_file)
            console.print("✅ [green]History cleared[/green]")
            return 0

        items = store.search_history(args.search) if args.search else store.sorted_history
        if not items:
            console.print("[yellow]No history entries.[/yellow]")
            return 0

        table = Table(title="🕘 Request History", box=box.ROUNDED, title_style="bold cyan")
        table.add_column("When", style="dim", no_wrap=True)
        table.add_column("Method", style="bold green")
        table.add_column("URL", style="cyan")
        table.add_column("Status")
        table.add_column("Time", justify="right")
        table.add_column("Tags", style="blue")

        for item in items:
            status = str(item.status) if item.status is not None else f"[red]{item.error or '-'}[/red]"
            elapsed = f"{item.response_time:.0f} ms" if item.response_time is not None else "-"
            when = item.timestamp[:19].replace("T", " ")
            table.add_row(when, item.method, item.url, status, elapsed, ", ".join(item.tags))

        console.print(table)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="request-explorer",
        description="Author, send and export HTTP requests",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: from configuration)",
    )

    subparsers = parser.add_subparsers(dest="command")

    create_codegen_subparser(subparsers)
    create_languages_subparser(subparsers)

    send_parser = subparsers.add_parser("send", help="Send a request and show the response")
    add_request_input_args(send_parser)
    send_parser.add_argument("--timeout", type=int, metavar="MS", help="Timeout in milliseconds")
    send_parser.add_argument("--history-file", metavar="FILE", help="Record the request in this history file")
    send_parser.add_argument("--include-headers", "-i", action="store_true", help="Show response headers")
    send_parser.set_defaults(func=lambda args, config: CLIHandler(config).send(args))

    history_parser = subparsers.add_parser("history", help="Show the request history")
    history_parser.add_argument("--history-file", metavar="FILE", help="History file to read")
    history_parser.add_argument("--search", metavar="QUERY", help="Filter by URL or method")
    history_parser.add_argument("--clear", action="store_true", help="Remove every entry")
    history_parser.set_defaults(func=lambda args, config: CLIHandler(config).history(args))

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(config_file=args.config) if args.config else load_config()
    except ConfigError as e:
        err_console.print(f"❌ [red]Configuration error: {e}[/red]")
        return 1

    setup_logging(args.log_level or config.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        console.print(
            Panel(
                "[bold]Export:[/bold] request-explorer codegen [dim]request.json[/dim] -l [cyan]python[/cyan]\n"
                "[bold]Send:[/bold] request-explorer send [dim]request.json[/dim]",
                title="💡 Quick Start",
                border_style="blue",
            )
        )
        return 1

    try:
        return args.func(args, config)
    except (CLIError, HistoryError) as e:
        err_console.print(f"❌ [red]{e}[/red]")
        return 1
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
