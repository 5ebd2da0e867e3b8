#!/usr/bin/env python3
"""fieldlog CLI entrypoint."""

import argparse
import logging
import sys
from pathlib import Path

from fieldlog.field_log import FieldLog
from fieldlog.lib.catalog import LOCALES, load_catalog
from fieldlog.lib.config import Settings, load_settings
from fieldlog.lib.validate import ValidationError
from fieldlog.shell import run_shell

logger = logging.getLogger(__name__)


def resolve_settings(args) -> Settings:
    """Load settings from --config or ./fieldlog.env, then apply flags."""
    settings = load_settings(Path(args.config) if args.config else None)

    if args.locale:
        settings.locale = args.locale
    if args.catalog:
        settings.catalog_path = Path(args.catalog)
    if args.verbose:
        settings.log_level = "DEBUG"
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_shell(args) -> int:
    """Start an interactive field log session."""
    try:
        settings = resolve_settings(args)
        configure_logging(settings.log_level)
        catalog = load_catalog(settings.locale, settings.catalog_path)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logger.debug(f"Starting session (locale={catalog.locale})")
    field_log = FieldLog(catalog=catalog)
    try:
        return run_shell(field_log)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='fieldlog', description='Plant field log')
    parser.add_argument('--config', '-c', help='Settings file (default: ./fieldlog.env if present)')
    parser.add_argument('--locale', '-l', choices=LOCALES, help='Display language')
    parser.add_argument('--catalog', help='YAML file overriding display text')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging to stderr')
    parser.set_defaults(func=cmd_shell)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
