"""
Output naming and path helpers
"""

import math
from pathlib import Path
from typing import List, Tuple
from .models import Operation, OperationKind

# Shrink output always uses this container
SHRINK_CONTAINER = 'mp4'


def split_extension(filename: str) -> Tuple[str, str]:
    """Split at the last dot; the extension keeps its leading dot"""
    idx = filename.rfind('.')
    if idx == -1:
        return filename, ''
    return filename[:idx], filename[idx:]


def scale_label(scale: int) -> int:
    """Label used in shrink output names"""
    return math.floor((100 / scale) * 2)


def output_name(filename: str, op: Operation) -> str:
    """Derive the output file name for an operation applied to filename"""
    base, ext = split_extension(filename)

    if op.kind == OperationKind.CONVERT:
        return f"{base}.{op.extension}"
    elif op.kind == OperationKind.REMOVE_AUDIO:
        return f"{base}.noAudio{ext}"
    elif op.kind == OperationKind.REMOVE_METADATA:
        return f"{base}.noMetadata{ext}"
    elif op.kind == OperationKind.RESIZE_WIDTH:
        return f"{base}.w{op.size}{ext}"
    elif op.kind == OperationKind.RESIZE_HEIGHT:
        return f"{base}.h{op.size}{ext}"
    else:
        # OperationKind.SHRINK
        return f"{base}.sc{scale_label(op.scale)}.{op.crf}.{op.encoder}.{SHRINK_CONTAINER}"


def output_path(target: Path, op: Operation) -> Path:
    """Absolute output path in the current working directory"""
    return (Path.cwd() / output_name(target.name, op)).absolute()


def list_directory(root: Path) -> List[Path]:
    """Directories first, then files, each sorted case-insensitively"""
    try:
        entries = list(root.iterdir())
    except OSError:
        return []
    dirs = sorted((p for p in entries if p.is_dir()), key=lambda p: p.name.lower())
    files = sorted((p for p in entries if not p.is_dir()), key=lambda p: p.name.lower())
    return dirs + files


def is_hidden(path: Path) -> bool:
    return path.name.startswith('.')
