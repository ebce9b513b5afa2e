"""Filesystem access used by candidate retrieval and session actions.

``FilesystemGateway`` is the narrow contract the core depends on.
``LocalFilesystem`` implements it on top of ``os`` scanning, ``send2trash``
and the platform "open" launcher.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from enum import Enum
from pathlib import Path
from typing import Protocol

from send2trash import send2trash

from .text_input import SEPARATOR

logger = logging.getLogger(__name__)

# Directory bundles that behave like single documents; never descended into.
OPAQUE_PACKAGE_SUFFIXES = (
    ".app",
    ".bundle",
    ".framework",
    ".kext",
    ".photoslibrary",
    ".pkg",
    ".plugin",
    ".xcodeproj",
    ".xcworkspace",
)


class OpenTarget(Enum):
    """Application used to open a submitted path."""

    DEFAULT = "default"
    TERMINAL = "terminal"


class FilesystemGateway(Protocol):
    """Filesystem primitives consumed by the search core."""

    def list_children(self, directory: str) -> list[str]:
        """Return absolute child paths; directories end with the separator.

        Raises ``OSError`` when ``directory`` cannot be listed.
        """
        ...

    def walk(self, root: str, max_depth: int) -> list[str]:
        """Return absolute file paths under ``root`` down to ``max_depth``."""
        ...

    def exists(self, path: str) -> bool: ...

    def create_file(self, path: str) -> None: ...

    def create_directory(self, path: str, recursive: bool = True) -> None: ...

    def move_to_trash(self, path: str) -> None: ...

    def open(self, path: str, target: OpenTarget = OpenTarget.DEFAULT) -> None: ...


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def is_opaque_package(name: str) -> bool:
    lowered = name.lower()
    return any(lowered.endswith(suffix) for suffix in OPAQUE_PACKAGE_SUFFIXES)


def join_child(directory: str, name: str) -> str:
    if directory.endswith(SEPARATOR):
        return directory + name
    return directory + SEPARATOR + name


def _entry_is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


class LocalFilesystem:
    """``FilesystemGateway`` backed by the local machine."""

    def list_children(self, directory: str) -> list[str]:
        children: list[str] = []
        with os.scandir(directory) as entries:
            for entry in entries:
                path = join_child(directory, entry.name)
                if _entry_is_dir(entry):
                    path += SEPARATOR
                children.append(path)
        return children

    def walk(self, root: str, max_depth: int) -> list[str]:
        """Collect non-hidden files, descending at most ``max_depth`` levels.

        Files directly inside ``root`` are at depth 1. Opaque package
        directories are listed as single entries (with a trailing separator)
        and their contents are skipped.
        """
        if max_depth <= 0:
            return []
        base = root if root.endswith(SEPARATOR) else root + SEPARATOR
        files: list[str] = []

        def visit(directory: str, depth: int) -> None:
            try:
                with os.scandir(directory) as entries:
                    children = sorted(entries, key=lambda item: item.name)
            except OSError as exc:
                if depth == 1:
                    raise
                logger.debug("skipping unreadable directory %s: %s", directory, exc)
                return

            subdirectories: list[str] = []
            for entry in children:
                name = entry.name
                if is_hidden_name(name):
                    continue
                path = directory + name
                if entry.is_symlink() or not _entry_is_dir(entry):
                    files.append(path)
                    continue
                if is_opaque_package(name):
                    files.append(path + SEPARATOR)
                    continue
                subdirectories.append(path + SEPARATOR)

            if depth >= max_depth:
                return
            for subdirectory in subdirectories:
                visit(subdirectory, depth + 1)

        visit(base, 1)
        return files

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def create_file(self, path: str) -> None:
        Path(path).touch(exist_ok=True)

    def create_directory(self, path: str, recursive: bool = True) -> None:
        Path(path).mkdir(parents=recursive, exist_ok=True)

    def move_to_trash(self, path: str) -> None:
        send2trash(path.rstrip(SEPARATOR) or SEPARATOR)

    def open(self, path: str, target: OpenTarget = OpenTarget.DEFAULT) -> None:
        cmd, cwd = open_command(path, target)
        logger.debug("launching %s", cmd)
        subprocess.Popen(
            cmd,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )


def open_command(path: str, target: OpenTarget) -> tuple[list[str], str | None]:
    """Return ``(argv, cwd)`` that opens ``path`` with the requested target."""
    if target is OpenTarget.TERMINAL:
        directory = path if path.endswith(SEPARATOR) else os.path.dirname(path) or SEPARATOR
        if sys.platform == "darwin":
            return ["open", "-a", "Terminal", directory], None
        terminal_env = os.environ.get("TERMINAL", "").strip()
        cmd = shlex.split(terminal_env) if terminal_env else ["x-terminal-emulator"]
        return cmd, directory
    if sys.platform == "darwin":
        return ["open", path], None
    return ["xdg-open", path], None


__all__ = [
    "FilesystemGateway",
    "LocalFilesystem",
    "OpenTarget",
    "OPAQUE_PACKAGE_SUFFIXES",
    "is_hidden_name",
    "is_opaque_package",
    "join_child",
    "open_command",
]
