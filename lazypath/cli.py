"""Command-line front door for lazypath.

Parses CLI options, merges them with the config file, and either prints ranked
candidates for a given input or launches the interactive finder.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .candidates import CandidateSource
from .config import LauncherConfig, load_launcher_config
from .filesystem import FilesystemGateway, LocalFilesystem
from .mode import PendingFuzzyMode
from .runtime import run_launcher
from .session import SessionState
from .text_input import SEPARATOR
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def list_candidates(
    gateway: FilesystemGateway,
    text: str,
    config: LauncherConfig,
    fuzzy_root: str | None = None,
) -> list[str]:
    """Return the ranked results the finder would show for ``text``."""
    source = CandidateSource(gateway, fuzzy_max_depth=config.fuzzy_max_depth)
    session = SessionState(source, text, max_results=config.max_results)
    if fuzzy_root is not None:
        session.mode = PendingFuzzyMode(fuzzy_root)
    session.refresh()
    return list(session.results)


def configure_logging(log_file: str | None, log_level: str) -> None:
    """Send logs to ``log_file``; without one, logging stays silent."""
    if log_file is None:
        logging.getLogger("lazypath").addHandler(logging.NullHandler())
        return
    logging.basicConfig(filename=log_file, level=log_level.upper(), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Type a path, pick a ranked completion, and open it."
    )
    parser.add_argument("path", nargs="?", default=None, help="Starting directory. Defaults to home.")
    parser.add_argument("--max-results", type=_positive_int, default=None, help="Maximum results shown (default: 18).")
    parser.add_argument(
        "--fuzzy-max-depth",
        type=_positive_int,
        default=None,
        help="Directory depth walked by fuzzy search (default: 4).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", metavar="TEXT", help="Print ranked results for TEXT and exit.")
    parser.add_argument(
        "--fuzzy-root",
        metavar="ROOT",
        help="With --list, rank recursively under ROOT using fuzzy matching.",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    parser.add_argument(
        "--log-level",
        default="debug",
        choices=["debug", "info", "warning", "error"],
        help="Log level used with --log-file.",
    )
    return parser


def _start_directory(raw_path: str | None) -> str:
    path = Path(raw_path).expanduser() if raw_path else Path.home()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    path = path.resolve()
    if not path.is_dir():
        path = path.parent
    text = str(path)
    return text if text.endswith(SEPARATOR) else text + SEPARATOR


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the finder or a one-shot listing."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    config = load_launcher_config(
        max_results=args.max_results,
        fuzzy_max_depth=args.fuzzy_max_depth,
        theme=args.theme,
    )

    if args.fuzzy_root is not None and args.list is None:
        raise SystemExit("--fuzzy-root requires --list.")

    if args.list is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --list.")
        text = args.list
        if not text.startswith(SEPARATOR):
            raise SystemExit(f"--list expects an absolute path: {text!r}")
        fuzzy_root = args.fuzzy_root
        if fuzzy_root is not None and not text.startswith(fuzzy_root):
            raise SystemExit("--fuzzy-root must be a prefix of --list text.")
        for result in list_candidates(LocalFilesystem(), text, config, fuzzy_root=fuzzy_root):
            sys.stdout.write(result + "\n")
        return

    start = _start_directory(args.path)
    if not (os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())):
        raise SystemExit("Interactive mode requires a terminal; use --list for scripted output.")
    final_text = run_launcher(start, config, no_color=args.no_color)
    logging.getLogger(__name__).debug("session closed at %s", final_text)


if __name__ == "__main__":
    main()
