"""Session-ending actions executed against the filesystem gateway.

Failures are returned as messages rather than raised, so a failed create,
open or trash leaves the session open with the error shown.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .filesystem import FilesystemGateway, OpenTarget
from .text_input import SEPARATOR


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitAction:
    """Create ``path`` when missing, then open it."""

    path: str
    target: OpenTarget = OpenTarget.DEFAULT


@dataclass(frozen=True)
class TrashAction:
    path: str


@dataclass(frozen=True)
class CancelAction:
    """Close without touching the filesystem."""


SessionAction = SubmitAction | TrashAction | CancelAction


@dataclass(frozen=True)
class ActionOutcome:
    closed: bool
    error: str | None = None


def _parent_directory(path: str) -> str:
    parent = os.path.dirname(path)
    return parent if parent else SEPARATOR


def ensure_path_exists(gateway: FilesystemGateway, path: str) -> None:
    """Create ``path`` as a directory (trailing separator) or empty file."""
    if gateway.exists(path):
        return
    if path.endswith(SEPARATOR):
        gateway.create_directory(path, recursive=True)
        return
    parent = _parent_directory(path)
    if not gateway.exists(parent):
        gateway.create_directory(parent, recursive=True)
    gateway.create_file(path)


def perform_action(gateway: FilesystemGateway, action: SessionAction) -> ActionOutcome:
    if isinstance(action, CancelAction):
        return ActionOutcome(closed=True)

    if isinstance(action, TrashAction):
        try:
            gateway.move_to_trash(action.path)
        except OSError as exc:
            logger.warning("moving %s to trash failed: %s", action.path, exc)
            return ActionOutcome(closed=False, error=f"Cannot move to trash: {exc}")
        return ActionOutcome(closed=True)

    try:
        ensure_path_exists(gateway, action.path)
    except OSError as exc:
        logger.warning("creating %s failed: %s", action.path, exc)
        return ActionOutcome(closed=False, error=f"Cannot create {action.path}: {exc}")
    try:
        gateway.open(action.path, action.target)
    except OSError as exc:
        logger.warning("opening %s failed: %s", action.path, exc)
        return ActionOutcome(closed=False, error=f"Cannot open {action.path}: {exc}")
    return ActionOutcome(closed=True)


__all__ = [
    "ActionOutcome",
    "CancelAction",
    "SessionAction",
    "SubmitAction",
    "TrashAction",
    "ensure_path_exists",
    "perform_action",
]
