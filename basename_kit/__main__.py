"""
basename-kit CLI.
Usage:
    basename-kit name PATH... [--suffix S] [--json]   Print base name of each path
    basename-kit init [--path DIR]                     Write a default config file
"""

import argparse
import json
import sys
from pathlib import Path

from .adapters import base_names
from .config import (
    CONFIG_FILENAME,
    Settings,
    configure_logging,
    load_settings,
    write_default_config,
)
from .core import strip_suffix


def cmd_name(args, settings):
    suffix = args.suffix if args.suffix is not None else settings.suffix
    names = [
        strip_suffix(n, suffix)
        for n in base_names(args.paths, profile=settings.profile)
    ]
    if args.json:
        print(json.dumps(names))
        return
    for n in names:
        print(n)


def cmd_init(args, settings):
    config_path = write_default_config(Path(args.path))
    print(f"Config: {config_path}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="basename-kit",
        description="Print the final component of '/'-separated paths",
    )
    parser.add_argument("--config", default=CONFIG_FILENAME, help="Config file path")
    sub = parser.add_subparsers(dest="command", required=True)

    p_name = sub.add_parser("name", help="Base name of each path")
    p_name.add_argument("paths", nargs="+", metavar="PATH")
    p_name.add_argument("-s", "--suffix", default=None, help="Suffix to remove")
    p_name.add_argument("--json", action="store_true", help="Print a JSON list")

    p_init = sub.add_parser("init", help="Write default config")
    p_init.add_argument("--path", default=".", help="Target directory")

    args = parser.parse_args(argv)

    dispatch = {
        "name": cmd_name,
        "init": cmd_init,
    }
    try:
        # init writes a fresh config and never reads an existing one
        if args.command == "init":
            settings = Settings()
        else:
            settings = load_settings(args.config)
        configure_logging(settings.log_level)
        dispatch[args.command](args, settings)
    except (ValueError, TypeError) as e:
        print(f"basename-kit: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
