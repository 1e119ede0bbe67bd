"""
Interactive session loop

One iteration: show the main menu until a leaf action is chosen, run it,
then ask whether and how to continue. Target and last output are carried
in a SessionState that each step returns.
"""

import sys
from pathlib import Path
from typing import List, Optional

from .models import (
    AppConfig, ToolPaths, SessionState, MenuEntry, ActionEntry, BackEntry, InfoEntry, ExitEntry,
    SubMenuEntry
)
from .menus import main_menu
from .media_analyzer import show_file_info
from .processor import process_operation
from .rich_console import rich_output


class Session:
    """Menu-driven session over a single target file"""

    def __init__(self, config: AppConfig, tools: ToolPaths, ui=None, menu: Optional[List[MenuEntry]] = None):
        self.config = config
        self.tools = tools
        self.ui = ui if ui is not None else rich_output
        self.menu = menu if menu is not None else main_menu()

    def pick_target(self, root: Path) -> Path:
        """Descend into chosen directories until a file is chosen"""
        while True:
            chosen = self.ui.pick_entry(root)
            if not chosen.is_dir():
                return chosen
            root = chosen

    def select_target(self) -> Path:
        if self.config.dir_mode:
            return self.pick_target(self.config.start_path)
        return self.config.start_path

    def choose_action(self, state: SessionState) -> ActionEntry:
        """Present the main menu until a leaf action is picked"""
        labels = [entry.label for entry in self.menu]
        # ffprobe output stays on screen until the next choice
        keep_output = False
        while True:
            entry = self.menu[self.ui.select(f"Working on {state.target}", labels, clear=not keep_output)]
            keep_output = False

            if isinstance(entry, ExitEntry):
                sys.exit(0)
            elif isinstance(entry, InfoEntry):
                show_file_info(self.tools.ffprobe, state.target)
                keep_output = True
            elif isinstance(entry, SubMenuEntry):
                sub_labels = [e.label for e in entry.entries]
                chosen = entry.entries[self.ui.select(entry.format_title(state.target), sub_labels)]
                if isinstance(chosen, BackEntry):
                    continue
                return chosen
            elif isinstance(entry, ActionEntry):
                return entry

    def execute(self, state: SessionState, entry: ActionEntry) -> SessionState:
        """Run the action on the current target and record its output"""
        op = entry.operation
        if op.needs_size:
            size = self.ui.ask_int(entry.size_prompt or 'Choose size')
            while size <= 0:
                self.ui.print_error('Size must be a positive number')
                size = self.ui.ask_int(entry.size_prompt or 'Choose size')
            op = op.with_size(size)
        out = process_operation(state.target, op, self.tools, debug=self.config.debug)
        return SessionState(target=state.target, last_output=out)

    def ask_next(self, state: SessionState) -> SessionState:
        """Continue/exit prompts after an executed action"""
        if not self.ui.confirm('Do you want to continue', default=True):
            sys.exit(0)
        if self.ui.confirm('Continue with new file', default=True):
            # Output is adopted without checking that it exists
            return SessionState(target=state.last_output, last_output=state.last_output)
        if self.ui.confirm('Choose new file', default=True):
            return SessionState(target=self.select_target(), last_output=state.last_output)
        return state

    def step(self, state: SessionState) -> SessionState:
        entry = self.choose_action(state)
        state = self.execute(state, entry)
        return self.ask_next(state)

    def run(self):
        """Loop until the user exits"""
        state = SessionState(target=self.select_target())
        while True:
            state = self.step(state)
