"""
featurewiki CLI entry point.

Subcommand-based CLI using stdlib argparse.
Current commands: check, info, init
"""

import argparse
import sys
from pathlib import Path

from featurewiki import __version__
from featurewiki.config import (
    DEFAULT_CONFIG_FILE,
    Config,
    ConfigError,
    load_config,
    write_config,
)
from featurewiki.dependencies import DependencyChecker


def _load_or_exit(path: Path) -> Config:
    try:
        return load_config(path)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_check(args) -> None:
    """Verify tools and config; exits 1 with a report if anything is missing."""
    config = _load_or_exit(args.config)
    DependencyChecker(config).check()
    print("All checks passed.")


def cmd_info(args) -> None:
    config = _load_or_exit(args.config)
    print(f"featurewiki {__version__} ({args.config})")
    for name, value in config.as_dict().items():
        print(f"  {name}: {value}")


def cmd_init(args) -> None:
    """Write a starter config file."""
    if args.config.exists():
        print(
            f"{args.config} already exists; remove it first to start over.",
            file=sys.stderr,
        )
        sys.exit(1)

    config = Config(repository_url=args.repository_url)
    if args.features_dir:
        config.features_dir = args.features_dir
    write_config(args.config, config)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser():
    parser = argparse.ArgumentParser(
        prog="featurewiki",
        description="Keep Cucumber feature files in sync with a git wiki.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Shared by every subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help=f"Path to the config file (default: {DEFAULT_CONFIG_FILE})",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="Verify git, cucumber and the config are ready",
    )
    check_parser.set_defaults(func=cmd_check)

    info_parser = subparsers.add_parser(
        "info", parents=[common], help="Show the loaded configuration"
    )
    info_parser.set_defaults(func=cmd_info)

    init_parser = subparsers.add_parser(
        "init", parents=[common], help="Write a starter config file"
    )
    init_parser.add_argument("--repository-url", help="Git URL of the wiki")
    init_parser.add_argument("--features-dir", help="Directory holding .feature files")
    init_parser.set_defaults(func=cmd_init)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
