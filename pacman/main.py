"""Pac-Man level tool CLI entry point."""

import argparse
import os
import sys

from level_errors import LevelError
from level_parser import ParserConfig, level_name_from_path, list_level_files, load_level

# Level files live in the source tree; run this as `python main.py` from pacman/.
# PACMAN_LEVELS_DIR points the CLI at a different checkout or data directory.
DEFAULT_LEVELS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data", "levels")


def default_levels_dir():
    return os.environ.get("PACMAN_LEVELS_DIR", DEFAULT_LEVELS_DIR)


def cmd_list(args):
    paths = list_level_files(args.levels_dir)
    if not paths:
        print(f"No levels found in {args.levels_dir}", file=sys.stderr)
        return 1
    for path in paths:
        print(f"{level_name_from_path(path):<24s}  {path}")
    return 0


def cmd_show(args):
    config = ParserConfig(test_mode=args.test_mode)
    try:
        level = load_level(args.path, config)
    except (LevelError, OSError) as e:
        print(f"{args.path}: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(f"Name: {level.name}")
    print(f"Size: {level.width}x{level.height}")
    print(f"Pacman spawns: {len(level.pacman_spawns)}, ghost spawns: {len(level.ghost_spawns)}")
    print(level)
    return 0


def cmd_validate(args):
    """Parse and validate each level, reporting one line per file."""
    paths = args.paths or list_level_files(args.levels_dir)
    if not paths:
        print(f"No levels found in {args.levels_dir}", file=sys.stderr)
        return 1

    config = ParserConfig(test_mode=args.test_mode)
    failed = 0
    for path in paths:
        try:
            level = load_level(path, config)
            level.validate()
        except (LevelError, OSError) as e:
            failed += 1
            print(f"FAIL  {path}: {type(e).__name__}: {e}", file=sys.stderr)
            continue
        print(f"OK    {path} ({level.name}, {level.width}x{level.height})")

    print(f"{len(paths) - failed}/{len(paths)} levels valid")
    return 1 if failed else 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pac-Man level tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List level files")
    list_parser.add_argument("--levels-dir", default=default_levels_dir())
    list_parser.set_defaults(func=cmd_list)

    show_parser = subparsers.add_parser("show", help="Parse a level and print it")
    show_parser.add_argument("path")
    show_parser.add_argument("--test-mode", action="store_true", help="Allow levels without a pacman spawn")
    show_parser.set_defaults(func=cmd_show)

    validate_parser = subparsers.add_parser("validate", help="Parse and validate level files")
    validate_parser.add_argument(
        "paths",
        nargs="*",
        help="Level files to check (default: every level in --levels-dir)",
    )
    validate_parser.add_argument("--levels-dir", default=default_levels_dir())
    validate_parser.add_argument("--test-mode", action="store_true", help="Allow levels without a pacman spawn")
    validate_parser.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
