"""CLI for the dfget file utilities."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from dfget.common import ConfigLoader, DfgetError, LogContext, expand_path_variables, setup_logging
from .config import FileUtilConfig
from .file_util import (
    copy_file,
    create_directory,
    delete_files,
    is_dir,
    is_regular_file,
    link,
    md5_sum,
    move_file,
    move_file_after_check_md5,
    path_exists,
)

# Application name derived from package name
_package = __package__ or "dfget.fileutil"
APP_NAME = _package.replace('_', '-').replace('.', '-')

# Use __package__ to avoid __main__ when run as module
logger = logging.getLogger(__package__ or __name__)


def mkdir_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Create a directory tree."""
    create_directory(args.path)
    logger.info(f"Directory ready: {args.path}")
    return 0


def rm_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Delete files, best effort. Always succeeds."""
    delete_files(*args.paths)
    logger.info(f"Delete attempted for {len(args.paths)} path(s)")
    return 0


def cp_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Copy a file without overwriting."""
    copy_file(args.src, args.dst, buffer_size=config.transfer.buffer_size)
    logger.info(f"Copied {args.src} -> {args.dst}")
    return 0


def mv_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Move a file, optionally verifying its MD5 digest first."""
    if args.md5 is not None:
        move_file_after_check_md5(args.src, args.dst, args.md5.lower())
        logger.info(f"Verified and moved {args.src} -> {args.dst}")
    else:
        move_file(args.src, args.dst)
        logger.info(f"Moved {args.src} -> {args.dst}")
    return 0


def ln_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Create a hard link."""
    link(args.src, args.link_name)
    logger.info(f"Linked {args.link_name} -> {args.src}")
    return 0


def md5_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Print MD5 digests in md5sum format.

    Returns 1 if any digest could not be computed.
    """
    failed = 0
    for path in args.paths:
        digest = md5_sum(path)
        if not digest:
            logger.error(f"Cannot compute md5: {path}")
            failed += 1
            continue
        print(f"{digest}  {path}")
    return 1 if failed else 0


def stat_command(args: argparse.Namespace, config: FileUtilConfig) -> int:
    """Print existence and type of a path."""
    print(
        f"exists={path_exists(args.path)} "
        f"dir={is_dir(args.path)} "
        f"regular={is_regular_file(args.path)}"
    )
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace, FileUtilConfig], int]] = {
    "mkdir": mkdir_command,
    "rm": rm_command,
    "cp": cp_command,
    "mv": mv_command,
    "ln": ln_command,
    "md5": md5_command,
    "stat": stat_command,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Filesystem helpers for staging and verifying downloaded files"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (overrides config)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    mkdir_parser = subparsers.add_parser("mkdir", help="Create a directory and its parents")
    mkdir_parser.add_argument("path")

    rm_parser = subparsers.add_parser("rm", help="Delete files, ignoring failures")
    rm_parser.add_argument("paths", nargs="+")

    cp_parser = subparsers.add_parser("cp", help="Copy a file (never overwrites)")
    cp_parser.add_argument("src")
    cp_parser.add_argument("dst")

    mv_parser = subparsers.add_parser("mv", help="Move a file")
    mv_parser.add_argument("src")
    mv_parser.add_argument("dst")
    mv_parser.add_argument(
        "--md5",
        help="Expected MD5 digest of src; the move is refused on mismatch"
    )

    ln_parser = subparsers.add_parser("ln", help="Create a hard link")
    ln_parser.add_argument("src")
    ln_parser.add_argument("link_name")

    md5_parser = subparsers.add_parser("md5", help="Print MD5 digests")
    md5_parser.add_argument("paths", nargs="+")

    stat_parser = subparsers.add_parser("stat", help="Show whether a path exists and its type")
    stat_parser.add_argument("path")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the dfget-fileutil command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    loader = ConfigLoader(
        app_name=APP_NAME,
        config_class=FileUtilConfig
    )
    config = loader.load(defaults_path=args.config)

    log_file = expand_path_variables(config.logging.file, APP_NAME) if config.logging.file else None
    setup_logging(
        level=args.log_level or config.logging.level,
        format_type=config.logging.format,
        log_file=Path(log_file) if log_file else None,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
    )

    with LogContext(logger, command=args.command):
        try:
            return COMMANDS[args.command](args, config)
        except (DfgetError, OSError) as e:
            logger.error(f"{args.command} failed: {e}")
            return 1


if __name__ == "__main__":
    sys.exit(main())
