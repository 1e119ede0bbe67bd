"""
FFmpeg command building for menu operations
"""

from pathlib import Path
from .models import Operation, OperationKind

def build_ffmpeg_cmd(ffmpeg: str, inp: Path, out: Path, op: Operation):
    """Build FFmpeg command for an operation"""
    base = [ffmpeg, '-i', str(inp)]

    if op.kind == OperationKind.CONVERT:
        # Container/format picked by ffmpeg from the output extension
        return base + [str(out)]
    elif op.kind == OperationKind.REMOVE_AUDIO:
        return base + ['-an', str(out)]
    elif op.kind == OperationKind.REMOVE_METADATA:
        return base + ['-map_metadata', '-1', str(out)]
    elif op.kind == OperationKind.RESIZE_WIDTH:
        # -1 keeps the aspect ratio
        return base + ['-vf', f'scale={op.size}:-1', str(out)]
    elif op.kind == OperationKind.RESIZE_HEIGHT:
        return base + ['-vf', f'scale=-1:{op.size}', str(out)]
    else:
        # OperationKind.SHRINK
        return base + [
            '-vf', f'scale=trunc(iw/{op.scale})*2:trunc(ih/{op.scale})*2',
            '-c:v', op.encoder,
            '-crf', str(op.crf),
            str(out)
        ]

def build_ffprobe_cmd(ffprobe: str, target: Path):
    """Plain ffprobe call; output goes straight to the terminal"""
    return [ffprobe, str(target)]

def format_cmd(cmd) -> str:
    """Quote arguments containing spaces for display"""
    return ' '.join(f'"{c}"' if ' ' in str(c) else str(c) for c in cmd)
