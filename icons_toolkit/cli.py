"""Command-line entrypoint.

Usage:
    icons-toolkit setup                     # Store read-only API credentials
    icons-toolkit clone [all|main|dev]      # Clone the published icons repository
    icons-toolkit fetch                     # Fetch and classify wallet assets
    icons-toolkit todo                      # List assets without a published icon
    icons-toolkit build [all|icons|manifest|markdown]
    icons-toolkit release                   # Assemble the release directory
    icons-toolkit help                      # Show the maintenance workflow
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys
from typing import Callable, Dict, List, Optional

from icons_toolkit.core.config import Settings, get_settings
from icons_toolkit.core.exceptions import CredentialsError, ToolkitError
from icons_toolkit.core.logging import configure_logging, get_logger
from icons_toolkit.core.store import ConfigStore, open_store
from icons_toolkit.ingestion.binance import BinanceClient, BinanceSource
from icons_toolkit.ingestion.git import GitClient
from icons_toolkit.services.build_service import BUILD_TARGETS, BuildService
from icons_toolkit.services.clone_service import CLONE_TARGETS, CloneService
from icons_toolkit.services.fetch_service import FetchService
from icons_toolkit.services.manifest import MANIFEST_FILE
from icons_toolkit.services.release_service import ReleaseService
from icons_toolkit.services.setup_service import SetupService
from icons_toolkit.services.todo import TodoService, format_report

logger = get_logger("cli")

BANNER = "◆ Binance Icons Toolkit ◆"

WORKFLOW = """\
1. setup    Store a Binance API key & secret with read-only permissions.
2. clone    Clone https://github.com/VadimMalykhin/binance-icons #main and #dev branches.
3. fetch    Fetch Binance wallet assets and split them into crypto, ETF and currency.
4. todo     List assets that have no icon in the published manifest yet.
5. build    Optimize icons, merge the manifest and render README/PREVIEW.
6. release  Copy the generated artifacts into the release directory.
"""

# Commands that work without stored credentials
NO_SETUP_COMMANDS = {"setup", "help"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="icons-toolkit", description="Binance icons maintenance toolkit")
    sub = parser.add_subparsers(dest="command")

    setup = sub.add_parser("setup", help="store API credentials")
    setup.add_argument("--key", help="Binance API key (prompted if omitted)")
    setup.add_argument("--secret", help="Binance API secret (prompted if omitted)")
    setup.add_argument("--yes", action="store_true", help="save without asking")

    clone = sub.add_parser("clone", help="clone the icons repository")
    clone.add_argument("target", nargs="?", choices=CLONE_TARGETS, default="all")
    clone.add_argument("--verbose", action="store_true")

    sub.add_parser("fetch", help="fetch all assets from the Binance exchange")
    sub.add_parser("todo", help="list icons still to do")

    build = sub.add_parser("build", help="build icons, manifest and markdown")
    build.add_argument("target", nargs="?", choices=BUILD_TARGETS, default="all")

    sub.add_parser("release", help="create the release directory")
    sub.add_parser("help", help="show the maintenance workflow")
    return parser


def _client_factory(settings: Settings) -> Callable[[str, str], BinanceClient]:
    def factory(key: str, secret: str) -> BinanceClient:
        return BinanceClient(
            key,
            secret,
            base_url=settings.BINANCE_BASE_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            recv_window=settings.RECV_WINDOW_MS,
        )

    return factory


# -------------------------------------------------------------------------
# Commands
# -------------------------------------------------------------------------
async def run_setup(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    key = args.key or getpass.getpass("Enter the Binance API Key: ")
    secret = args.secret or getpass.getpass("Enter the Binance API Secret: ")

    service = SetupService(store, _client_factory(settings))
    restrictions = await service.check(key, secret)

    if not args.yes:
        answer = input("Save your credentials to the configuration file? [y/N] ").strip().lower()
        if answer not in ("y", "yes"):
            logger.warning("Credentials were not saved")
            return
    service.save(key, secret, restrictions)


async def run_clone(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    git = GitClient(settings.REPOSITORY_URL, cmd=settings.GIT_CMD, verbose=args.verbose)
    CloneService(settings, git).run(args.target)


async def run_fetch(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    key, secret = store.credentials()
    if not key or not secret:
        raise CredentialsError("API key or secret is not set. Run the `setup` command.")

    source = BinanceSource(_client_factory(settings)(key, secret))
    logger.info("Fetching Assets...")
    await FetchService(source, settings.generated_dir).run()


async def run_todo(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    service = TodoService(settings.branch_dir("main") / MANIFEST_FILE, settings.generated_dir)
    for report in service.run():
        print("\n".join(format_report(report)))


async def run_build(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    await BuildService(settings).run(args.target)


async def run_release(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    ReleaseService(settings.generated_dir, settings.release_dir).run()


async def run_help(args: argparse.Namespace, settings: Settings, store: ConfigStore) -> None:
    print(WORKFLOW)


COMMANDS: Dict[str, Callable] = {
    "setup": run_setup,
    "clone": run_clone,
    "fetch": run_fetch,
    "todo": run_todo,
    "build": run_build,
    "release": run_release,
    "help": run_help,
}


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Main entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings or get_settings()
    configure_logging(settings)

    print(BANNER + "\n")
    command = args.command or "help"
    store = open_store(settings.config_path)

    if command not in NO_SETUP_COMMANDS and not store.is_setup:
        logger.error("The toolkit is not configured. Run the `setup` command.")
        return 1
    if store.is_unsafe:
        logger.warning("! USE THE API KEY WITH READ-ONLY PERMISSIONS!")

    try:
        asyncio.run(COMMANDS[command](args, settings, store))
    except ToolkitError as exc:
        logger.error(f"× {exc}")
        return 1
    except KeyboardInterrupt:
        logger.warning("× Operation cancelled")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
