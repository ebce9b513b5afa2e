"""Runtime composition layer for lazypath.

Builds the filesystem gateway and session manager, enters raw terminal mode,
and runs the key loop for one session.
"""

from __future__ import annotations

import shutil
import sys
from functools import partial

from ..config import LauncherConfig
from ..filesystem import LocalFilesystem
from ..input.reader import read_key
from ..launcher import SessionManager
from ..render import render
from ..session import SessionView
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, run_main_loop


def run_launcher(start_directory: str, config: LauncherConfig, no_color: bool = False) -> str:
    """Run one interactive session on the controlling terminal.

    Returns the input text at the moment the session closed.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    manager = SessionManager(
        LocalFilesystem(),
        max_results=config.max_results,
        fuzzy_max_depth=config.fuzzy_max_depth,
    )
    manager.open(start_directory)

    def render_view(view: SessionView) -> None:
        # Theme and size are looked up per frame so terminal changes apply immediately.
        term = shutil.get_terminal_size((80, 24))
        theme = resolve_theme(config.theme, no_color=no_color)
        render(view, theme, term.columns, term.lines, fd=stdout_fd)

    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        return run_main_loop(
            manager,
            RuntimeLoopCallbacks(
                read_key=partial(read_key, stdin_fd),
                render_view=render_view,
            ),
        )
