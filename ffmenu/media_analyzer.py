"""
File information display via ffprobe
"""

from pathlib import Path
from .ffmpeg_runner import run
from .ffmpeg_builder import build_ffprobe_cmd

def show_file_info(ffprobe: str, target: Path):
    """Print ffprobe output for target; failures are ignored"""
    run(build_ffprobe_cmd(ffprobe, target))
