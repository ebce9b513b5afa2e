"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (``run_launcher``) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_launcher(*args, **kwargs):
    """Lazily import launcher entrypoint to avoid terminal setup on import."""
    from .app import run_launcher as _run_launcher

    return _run_launcher(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_launcher",
    "run_main_loop",
]
