"""
ffmenu library modules

Interactive menu front-end for common ffmpeg operations.
"""

# Import all public interfaces for easy access
from .models import Operation, OperationKind, SessionState, ToolPaths, AppConfig
from .file_utils import output_name, output_path, split_extension, scale_label
from .ffmpeg_builder import build_ffmpeg_cmd, build_ffprobe_cmd
from .ffmpeg_runner import run, setup_signal_handlers
from .binaries import resolve_tools, ensure_bundled, DownloadError
from .media_analyzer import show_file_info
from .processor import process_operation
from .menus import main_menu
from .session import Session

__all__ = [
    'Operation', 'OperationKind', 'SessionState', 'ToolPaths', 'AppConfig',
    'output_name', 'output_path', 'split_extension', 'scale_label',
    'build_ffmpeg_cmd', 'build_ffprobe_cmd',
    'run', 'setup_signal_handlers',
    'resolve_tools', 'ensure_bundled', 'DownloadError',
    'show_file_info',
    'process_operation',
    'main_menu',
    'Session'
]
