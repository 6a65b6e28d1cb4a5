"""
CLI integration for code generation functionality.

Provides the ``codegen`` and ``languages`` subcommands and the request input
options shared with ``send``.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich import box

from . import (
    GeneratorError,
    get_generator,
    UnsupportedLanguageError,
    generate_result,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from ..config import AppConfig
from ..environment import EnvironmentStore, EnvironmentStoreError
from ..logging_config import get_logger
from ..models import HttpMethod, RequestItem
from ..utils import (
    RequestLoaderError,
    load_request_from_file,
    load_request_from_stream,
    parse_header_arguments,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles; code goes to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def add_request_input_args(parser: argparse.ArgumentParser):
    """Add the options describing which request to work on."""
    input_group = parser.add_argument_group("request input")
    input_group.add_argument(
        "file", nargs="?", help="JSON file holding a saved request"
    )
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the request JSON from standard input"
    )
    input_group.add_argument(
        "--method",
        "-X",
        type=str.upper,
        choices=[m.value for m in HttpMethod],
        help="HTTP method (overrides the file)",
    )
    input_group.add_argument("--url", "-u", help="Request URL (overrides the file)")
    input_group.add_argument(
        "--header",
        "-H",
        action="append",
        default=[],
        metavar="'KEY: VALUE'",
        help="Header to add; may be repeated",
    )
    input_group.add_argument(
        "--data", "-d", metavar="BODY", help="Request body (overrides the file)"
    )

    env_group = parser.add_argument_group("environment")
    env_group.add_argument(
        "--env-file", metavar="FILE", help="JSON file with named environments"
    )
    env_group.add_argument(
        "--env", metavar="NAME", help="Environment used to resolve {{NAME}} placeholders"
    )


def get_request_input(args: argparse.Namespace) -> RequestItem:
    """
    Build the request described by the CLI arguments.

    A file or stdin provides the base record; flags override its fields.

    Raises:
        CLIError: If no request can be assembled
    """
    try:
        if getattr(args, "file", None):
            item = load_request_from_file(args.file)
        elif getattr(args, "stdin", False):
            item = load_request_from_stream(sys.stdin)
        elif getattr(args, "url", None):
            item = RequestItem(method=HttpMethod.GET.value, url=args.url)
        else:
            raise CLIError("Input required (file, --stdin, or --url)")
    except (RequestLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load request: {e}") from e

    if getattr(args, "method", None):
        item.method = args.method
    if getattr(args, "url", None):
        item.url = args.url
    if getattr(args, "header", None):
        item.headers.update(parse_header_arguments(args.header))
    if getattr(args, "data", None) is not None:
        item.body = args.data

    return item


def load_environment(args: argparse.Namespace, config: AppConfig) -> Optional[EnvironmentStore]:
    """Load the environment store named by the arguments or the configuration."""
    env_file = getattr(args, "env_file", None) or config.environment_file
    if not env_file:
        return None

    try:
        store = EnvironmentStore.load(env_file)
        active = getattr(args, "env", None) or config.active_environment
        if active:
            store.set_active(active)
    except EnvironmentStoreError as e:
        raise CLIError(f"Environment error: {e}") from e
    return store


def create_codegen_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``codegen`` subcommand parser.

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for codegen command
    """
    parser = subparsers.add_parser(
        "codegen",
        help="Export a request as code",
        description="Generate ready-to-run code issuing an HTTP request",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  request-explorer codegen request.json --language python
  request-explorer codegen -X POST --url https://api.test/x -H 'Content-Type: application/json' -d '{"a":1}' -l curl
  request-explorer codegen request.json -l go -o main.go
        """.strip(),
    )

    add_request_input_args(parser)

    parser.add_argument(
        "--language", "-l", help="Target language (default: from configuration)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the code without syntax highlighting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    parser.set_defaults(func=handle_codegen_command)
    return parser


def create_languages_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``languages`` subcommand parser."""
    parser = subparsers.add_parser(
        "languages",
        help="List supported target languages",
        description="List supported target languages or describe one",
    )
    parser.add_argument(
        "--info",
        metavar="LANGUAGE",
        help="Show detailed information about a specific language",
    )
    parser.set_defaults(func=handle_languages_command)
    return parser


def handle_languages_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Handle the languages subcommand."""
    if getattr(args, "info", None):
        return _show_language_info(args.info)
    return _list_languages()


def handle_codegen_command(args: argparse.Namespace, config: AppConfig) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments
        config: Application configuration

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        language = args.language or config.default_language
        if not _validate_language(language):
            return 1

        item = get_request_input(args)

        environment = load_environment(args, config)
        if environment is not None:
            item = environment.resolve_request_item(item)

        return _generate_and_output(item, language, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in language_info.items():
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            lang_name,
            info["display_name"],
            info["file_extension"],
            info["class"],
            aliases,
        )

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] request-explorer codegen [dim]request.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] request-explorer languages --info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        err_console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        err_console.print("[dim]Use 'request-explorer languages' to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]Name:[/bold] {info['display_name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['display_name']} Generator",
            border_style="green",
        )
    )

    examples_text = f"""Generate from a saved request:
[cyan]request-explorer codegen request.json --language {info['name']}[/cyan]

Generate to file:
[cyan]request-explorer codegen request.json -l {info['name']} -o request{info['file_extension']}[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    try:
        get_language_info(language)
    except UnsupportedLanguageError:
        if not silent:
            supported = list_supported_languages()
            err_console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            err_console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _generate_and_output(item: RequestItem, language: str, args: argparse.Namespace) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        result = generate_result(item, language)
    except GeneratorError as e:
        err_console.print(f"[red]✗[/red] {e}")
        return 1

    if not result.success:
        err_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            err_console.print(f"[dim]Details: {result.exception}[/dim]")
        logger.error("Code generation failed: %s", result.error_message)
        return 1

    info = get_language_info(language)

    output_file = getattr(args, "output", None)
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {info['display_name']} code saved to [cyan]{output_path}[/cyan]"
        )
    elif getattr(args, "plain", False) or not console.is_terminal:
        sys.stdout.write(result.code + "\n")
    else:
        console.print(Syntax(result.code, get_generator(language).syntax_name, theme="monokai"))

    logger.info("Generated %s code for %s %s", info["name"], item.method, item.url)

    if getattr(args, "verbose", False) and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        err_console.print()
        err_console.print(metadata_table)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")

    return 0
