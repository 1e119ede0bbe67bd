"""
Running a single operation on the current target
"""

from pathlib import Path
from .models import Operation, ToolPaths
from .ffmpeg_runner import run
from .ffmpeg_builder import build_ffmpeg_cmd, format_cmd
from .file_utils import output_path
from .rich_console import rich_output

def process_operation(target: Path, op: Operation, tools: ToolPaths, debug: bool = False) -> Path:
    """Run op on target and return the output path.

    The output path is returned whether or not ffmpeg succeeded; a failed
    run leaves the session untouched.
    """
    out = output_path(target, op)
    cmd = build_ffmpeg_cmd(tools.ffmpeg, target, out, op)

    rich_output.print_processing_start(out.name)
    if debug:
        rich_output.print_command(format_cmd(cmd))

    run(cmd)
    return out
