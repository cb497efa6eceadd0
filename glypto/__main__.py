"""CLI entry point: glypto scrape [URL] [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from glypto import __version__
from glypto.errors import GlyptoError
from glypto.factory import create_scraper, create_scraper_with_provider_names
from glypto.profiles import ScrapeConfig, load_config
from glypto.providers.loader import Loader
from glypto.providers.registry import ProviderRegistry
from glypto.query import fetch_html, parse_html
from glypto.settings import DEFAULT_LOG_LEVEL

if TYPE_CHECKING:
    from glypto.metadata import Metadata

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glypto",
        description=(
            "Scrape metadata from web pages: Open Graph tags, Twitter Cards,\n"
            "standard meta tags, titles, canonical URLs, favicons and feeds."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"glypto {__version__}")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    scrape = sub.add_parser(
        "scrape",
        help="Scrape metadata from a webpage",
        description=(
            "Scrape metadata from a webpage including Open Graph tags, Twitter Cards,\n"
            "standard meta tags, and other HTML elements.\n\n"
            "You can provide a URL as an argument or you will be prompted to enter one.\n\n"
            "Examples:\n"
            "  glypto scrape https://example.com\n"
            "  glypto scrape"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    scrape.add_argument("url", nargs="?", default=None, metavar="URL",
                        help="Page to scrape (prompted for when omitted)")
    scrape.add_argument("--providers", default=None, metavar="NAMES",
                        help="Comma-separated built-in providers, e.g. 'openGraph,other'")
    scrape.add_argument("--provider-dir", default=None, metavar="DIR",
                        help="Directory of provider plugin files (*.py)")
    scrape.add_argument("--config", default=None, metavar="FILE",
                        help="YAML config file with default and per-domain settings")
    scrape.add_argument("--timeout", type=int, default=None, metavar="N",
                        help="HTTP timeout in seconds")
    scrape.add_argument("--user-agent", default=None, metavar="UA",
                        help="Override the User-Agent header")
    scrape.add_argument("--json", action="store_true", default=False,
                        help="Print the result as JSON instead of formatted text")

    sub.add_parser("providers", help="List built-in providers and their priorities")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _get_url(url: str | None, err_console: Console, stdin: IO[str] | None = None) -> str:
    """Return *url*, prompting on *stdin* when it was not given.

    The prompt goes to *err_console* so stdout carries only the result.
    """
    if url is None:
        err_console.print("[blue]Enter the URL to scrape metadata from: [/blue]", end="")
        url = (stdin or sys.stdin).readline()
    url = url.strip()
    if not url:
        raise GlyptoError("URL cannot be empty")
    return url


def _effective_config(args: argparse.Namespace, url: str) -> ScrapeConfig:
    """Merge the config file (if any) with CLI flags; flags win."""
    config = load_config(args.config, url) if args.config else ScrapeConfig()
    overrides: dict[str, object] = {}
    if args.providers is not None:
        overrides["providers"] = [p.strip() for p in args.providers.split(",") if p.strip()]
    if args.provider_dir is not None:
        overrides["provider_dir"] = args.provider_dir
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.user_agent is not None:
        overrides["user_agent"] = args.user_agent
    return config.model_copy(update=overrides)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def _print_field(console: Console, name: str, value: str | None) -> None:
    shown = escape(value) if value is not None else "Not found"
    console.print(f"[bold]{name}:[/bold] {shown}")


def _print_provider_data(console: Console, title: str, data: dict[str, list[str]]) -> None:
    if not data:
        return
    tbl = Table(title=f"[bold]{title}[/bold]", box=box.SIMPLE_HEAVY, title_justify="left")
    tbl.add_column("Key", style="cyan", no_wrap=True)
    tbl.add_column("Value", style="green")
    for key, values in data.items():
        tbl.add_row(escape(key), escape(", ".join(values)))
    console.print(tbl)


def _display_results(meta: Metadata, console: Console) -> None:
    console.print("\n[green]✓ Metadata scraped successfully:[/green]\n")

    _print_field(console, "Title", meta.title)
    _print_field(console, "Description", meta.description)
    _print_field(console, "Image", meta.image)
    _print_field(console, "URL", meta.url)
    _print_field(console, "Site Name", meta.site_name)
    _print_field(console, "Favicon", meta.favicon)

    if meta.feeds:
        console.print("\n[bold]Feeds:[/bold]")
        for i, feed in enumerate(meta.feeds, 1):
            title = feed.title if feed.title is not None else "Untitled"
            console.print(f"  {i}. {escape(title)} ({escape(feed.type)}) - {escape(feed.href)}")

    console.print()
    _print_provider_data(console, "Open Graph Tags", meta.open_graph)
    _print_provider_data(console, "Twitter Card Tags", meta.twitter_card)


def _print_providers(console: Console) -> None:
    loader = Loader()
    registry = ProviderRegistry(loader.load_defaults())
    tbl = Table(title="[bold]Built-in providers[/bold]", box=box.SIMPLE_HEAVY)
    tbl.add_column("Priority", justify="right", style="dim")
    tbl.add_column("Name", style="cyan")
    tbl.add_column("Class", style="green")
    for provider in registry:
        tbl.add_row(str(provider.priority), provider.name, type(provider).__name__)
    console.print(tbl)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _run_scrape(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    url = _get_url(args.url, err_console)
    config = _effective_config(args, url)

    if not args.json:
        console.print(f"[yellow]Fetching metadata from: {escape(url)}[/yellow]")

    if config.providers:
        scraper = create_scraper_with_provider_names(config.providers)
    else:
        scraper = create_scraper(config.provider_dir)

    html = fetch_html(url, timeout=config.timeout, user_agent=config.user_agent)
    meta = scraper.scrape(parse_html(html))

    if args.json:
        console.print_json(data=meta.to_dict())
    else:
        _display_results(meta, console)
    return 0


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    console = console or Console()
    err_console = Console(stderr=True)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "providers":
        _print_providers(console)
        return 0

    try:
        return _run_scrape(args, console, err_console)
    except GlyptoError as exc:
        logger.debug("Scrape failed", exc_info=True)
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
