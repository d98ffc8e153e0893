# SPDX-License-Identifier: Apache-2.0
"""
Translation Cache - CLI Tool

Fetches translated language files from the language API and stores them in
the local cache.

Usage:
    translation-cache {files,applets,all} [options]

Examples:
    translation-cache files --config config.json     # Application language files
    translation-cache applets --root /srv/app        # Applet language XMLs
    translation-cache all -v                         # Both, with debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

from translation_cache.batch import (
    create_client,
    generate_applet_language_xml_files,
    generate_language_files,
)
from translation_cache.config import (
    KEY_API_KEY,
    KEY_API_TIMEOUT,
    KEY_API_URL,
    KEY_ROOT,
    MappingConfig,
)
from translation_cache.errors import LanguageCacheError
from translation_cache.pipeline.result import GenerationResult

logger = logging.getLogger(__name__)

COMMANDS = ("files", "applets", "all")

# Progress stages printed with an indent
_NESTED_STAGES = frozenset({"language"})


def parse_args() -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="translation-cache",
        description="Language cache generator - Stores translated language files locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s files --config config.json     # Application language files
  %(prog)s applets                        # Applet language XMLs
  %(prog)s all --root /srv/app            # Everything, cache under /srv/app/cache

Environment Variables:
  LANGUAGE_CACHE_ROOT           Root directory (cache/ is created below it)
  LANGUAGE_CACHE_APPLICATIONS   JSON object {application: [languages]}
  LANGUAGE_API_URL              Language API endpoint
  LANGUAGE_API_KEY              Language API key
  LANGUAGE_API_TIMEOUT          Request timeout in seconds
""",
    )

    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="What to generate: application files, applet XMLs, or all",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="JSON configuration file",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        help="Root directory (overrides system.paths.root)",
    )

    # API options
    api_group = parser.add_argument_group("API options")
    api_group.add_argument(
        "--api-url",
        help="Language API URL (or set LANGUAGE_API_URL)",
    )
    api_group.add_argument(
        "--api-key",
        help="Language API key (or set LANGUAGE_API_KEY)",
    )
    api_group.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    return parser.parse_args()


def build_config(args: argparse.Namespace) -> MappingConfig:
    """Combine config file, environment variables and CLI options.

    Later sources win: file, then environment, then command line.

    Raises:
        ConfigurationError: If the config file cannot be loaded.
    """
    base = MappingConfig.from_file(args.config) if args.config else MappingConfig()
    config = MappingConfig.from_env(base)
    return config.with_overrides(
        {
            KEY_ROOT: str(args.root) if args.root else None,
            KEY_API_URL: args.api_url,
            KEY_API_KEY: args.api_key,
            KEY_API_TIMEOUT: args.timeout,
        }
    )


def print_progress(stage: str, current: int, total: int, message: str = "") -> None:
    """Print a progress line to stdout."""
    if not message:
        return
    indent = "\t" if stage in _NESTED_STAGES else ""
    print(f"{indent}{message}")


async def run(args: argparse.Namespace) -> int:
    """Execute the requested generation.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    try:
        config = build_config(args)
        async with create_client(config) as client:
            result = GenerationResult()
            if args.command in ("files", "all"):
                result = await generate_language_files(config, client, print_progress)
            if result.ok and args.command in ("applets", "all"):
                result = result.merge(
                    await generate_applet_language_xml_files(config, client, print_progress)
                )
            result.raise_for_error()
    except LanguageCacheError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print()
    print(f"Complete: {len(result.written)} file(s) cached")
    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
