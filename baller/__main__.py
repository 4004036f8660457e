#!/usr/bin/env python3
"""
Baller - CLI Entry Point
========================

Usage:
    python -m baller create my-ball
    python -m baller init
    python -m baller destroy
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from . import __version__
from . import core
from .config import load_settings
from .errors import BallerError
from .payload import Payload, build_reserved_names
from .utils import print_ball_tree, print_error, print_header, print_success


# =============================================================================
# Commands
# =============================================================================

def cmd_create(args, context: dict) -> str:
    message = core.create(args.name, **context)
    if args.tree:
        print_ball_tree(Path.cwd() / args.name)
    return message


def cmd_init(args, context: dict) -> str:
    message = core.init(**context)
    if args.tree:
        print_ball_tree(Path.cwd())
    return message


def cmd_destroy(args, context: dict) -> str:
    return core.destroy(**context)


def cmd_update(args, context: dict) -> str:
    return core.update(**context)


def cmd_deploy(args, context: dict) -> str:
    return core.deploy(**context)


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baller",
        description="Baller - manage directories as balls",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show progress while moving files")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- CREATE command ---
    create_parser = subparsers.add_parser("create", help="Create a new, empty ball in a new directory")
    create_parser.add_argument("name", help="Name of the new ball directory")
    create_parser.add_argument("--tree", action="store_true",
                               help="Print the resulting layout")
    create_parser.set_defaults(func=cmd_create)

    # --- INIT command ---
    init_parser = subparsers.add_parser("init", help="Initialize current directory and files as a ball")
    init_parser.add_argument("--tree", action="store_true",
                             help="Print the resulting layout")
    init_parser.set_defaults(func=cmd_init)

    # --- UPDATE command ---
    update_parser = subparsers.add_parser("update", help="Update the current ball to latest Baller scripts")
    update_parser.set_defaults(func=cmd_update)

    # --- DESTROY command ---
    destroy_parser = subparsers.add_parser("destroy", aliases=["unball"],
                                           help="Remove all Baller scripts from current ball")
    destroy_parser.set_defaults(func=cmd_destroy)

    # --- DEPLOY command ---
    deploy_parser = subparsers.add_parser("deploy", help="Deploy the current ball (or update existing deploy)")
    deploy_parser.set_defaults(func=cmd_deploy)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = load_settings()
    if args.verbose:
        settings = replace(settings, verbose=True)

    if settings.verbose:
        print_header(f"BALLER {args.command.upper()}", str(Path.cwd()))

    # Built once, shared by every component of the command
    payload = Payload(settings.payload_dir)
    try:
        reserved = build_reserved_names(payload)
    except OSError as e:
        print_error(f"Could not read payload at {payload.root}: {e}")
        return 1
    context = {"payload": payload, "reserved": reserved, "settings": settings}

    try:
        message = args.func(args, context)
    except BallerError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130

    print_success(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
