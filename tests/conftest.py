"""
pytest configuration and fixtures for ffmenu tests

External executables are never required: tests stub the process boundary
(ffmenu.ffmpeg_runner.run and its imports) and drive the session with a
scripted UI.
"""

import pytest
import subprocess
from pathlib import Path
import sys

# Add the project root to path for importing
sys.path.insert(0, str(Path(__file__).parent.parent))
from ffmenu import AppConfig, ToolPaths


class ScriptedUI:
    """Stand-in for RichOutput that answers prompts from prepared lists.

    select() answers are given as labels. Running out of answers raises
    IndexError, which makes an unexpected extra prompt fail the test.
    """

    def __init__(self, selections=(), confirms=(), ints=(), picks=()):
        self.selections = list(selections)
        self.confirms = list(confirms)
        self.ints = list(ints)
        self.picks = list(picks)
        self.titles = []
        self.confirm_messages = []
        self.pick_roots = []
        self.errors = []
        self.cleared = []

    def select(self, title, labels, clear=True):
        self.titles.append(title)
        self.cleared.append(clear)
        return list(labels).index(self.selections.pop(0))

    def confirm(self, message, default=True):
        self.confirm_messages.append(message)
        return self.confirms.pop(0)

    def ask_int(self, message):
        return self.ints.pop(0)

    def pick_entry(self, root):
        self.pick_roots.append(root)
        return self.picks.pop(0)

    def print_error(self, message, details=None):
        self.errors.append(message)


@pytest.fixture
def scripted_ui():
    """Factory for scripted UIs"""
    return ScriptedUI


@pytest.fixture
def temp_dirs(tmp_path, monkeypatch):
    """Input and working directories; the working directory becomes cwd"""
    dirs = {
        'input': tmp_path / 'input',
        'work': tmp_path / 'work',
    }
    for dir_path in dirs.values():
        dir_path.mkdir()
    monkeypatch.chdir(dirs['work'])
    return dirs


@pytest.fixture
def tools():
    return ToolPaths(ffmpeg='ffmpeg', ffprobe='ffprobe', ffplay='ffplay')


@pytest.fixture
def make_config(tmp_path):
    """Build an AppConfig for a start path"""
    def _make_config(start_path: Path, **kwargs):
        return AppConfig(
            start_path=start_path,
            dir_mode=start_path.is_dir(),
            bin_dir=tmp_path / 'bin',
            **kwargs
        )
    return _make_config


@pytest.fixture
def sample_file(temp_dirs):
    """An (empty) input video file"""
    src = temp_dirs['input'] / 'movie.mkv'
    src.touch()
    return src


@pytest.fixture
def run_cli():
    """Fixture to run main.py as a separate process"""
    def _run_cli(args: list, stdin: str = ''):
        script_path = Path(__file__).parent.parent / 'main.py'
        cmd = [sys.executable, str(script_path)] + args
        return subprocess.run(cmd, capture_output=True, text=True, input=stdin, timeout=60)

    return _run_cli
