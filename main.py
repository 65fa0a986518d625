#!/usr/bin/env python3
"""Entry point: load the app config and print it, failing fast on bad input."""

import argparse
import json
import logging
import os
import sys

import yaml

from appconfig.config import load_config
from appconfig.dotenv_overlay import DEFAULT_DOTENV_PATH
from appconfig.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_log_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="App Config Loader")
    parser.add_argument(
        "--env-file", default=DEFAULT_DOTENV_PATH,
        help=f"Path to the dotenv file (default: {DEFAULT_DOTENV_PATH})",
    )
    parser.add_argument(
        "--no-env-file", action="store_true", default=False,
        help="Do not read any dotenv file",
    )
    parser.add_argument(
        "--format", choices=("yaml", "json"), default="yaml",
        help="Output format for the resolved config (default: yaml)",
    )
    parser.add_argument(
        "--show-secrets", action="store_true", default=False,
        help="Print secret values instead of masking them",
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=_default_log_level(),
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    return parser


def render(data: dict, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def main(argv=None) -> int:
    args = build_cli_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    dotenv_path = None if args.no_env_file else args.env_file
    try:
        config = load_config(dotenv_path=dotenv_path)
    except ConfigError as exc:
        logger.error("Failed to load config: %s", exc)
        return 1

    sys.stdout.write(render(config.as_dict(mask_secrets=not args.show_secrets), args.format))
    if args.format == "json":
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
