"""
Static menu definitions
"""

from typing import List
from .models import (
    Operation, OperationKind, ActionEntry, BackEntry, InfoEntry, ExitEntry, SubMenuEntry,
    MenuEntry, SCALE_DIVISORS
)

CONVERT_FORMATS = ['jpg', 'png', 'mp4']
RESIZE_SIZES = [192, 576, 768, 992, 1200, 1400]

# Quality presets as (label, crf)
QUALITY_PRESETS = [('no loss', 18), ('default loss', 23), ('loss', 28)]

# Encoders in menu order; libx264 output plays in Firefox
SHRINK_ENCODERS = [('libx264', ' (Firefox compatible)'), ('libx265', '')]

def convert_menu() -> SubMenuEntry:
    entries = [
        ActionEntry(label=f'Convert to {ext.upper()}',
                    operation=Operation(kind=OperationKind.CONVERT, extension=ext))
        for ext in CONVERT_FORMATS
    ]
    return SubMenuEntry(label='Convert', title='Convert', entries=entries + [BackEntry()])

def resize_menu(kind: OperationKind) -> SubMenuEntry:
    """Resize width or height sub-menu"""
    dimension = 'width' if kind == OperationKind.RESIZE_WIDTH else 'height'
    entries = [
        ActionEntry(label=f'Resize img ({size} {dimension})',
                    operation=Operation(kind=kind, size=size))
        for size in RESIZE_SIZES
    ]
    entries.append(ActionEntry(label=f'Resize img (custom {dimension})',
                               operation=Operation(kind=kind),
                               size_prompt=f'Choose {dimension}'))
    return SubMenuEntry(label=f'Resize image {dimension}', title=f'Resize {dimension}',
                        entries=entries + [BackEntry()])

def shrink_menu() -> SubMenuEntry:
    entries = []
    for encoder, suffix in SHRINK_ENCODERS:
        # Smallest output first
        for scale in sorted(SCALE_DIVISORS, reverse=True):
            for quality, crf in QUALITY_PRESETS:
                entries.append(ActionEntry(
                    label=f'scale {SCALE_DIVISORS[scale]}% {encoder} {quality}{suffix}',
                    operation=Operation(kind=OperationKind.SHRINK, scale=scale, crf=crf, encoder=encoder)
                ))
    return SubMenuEntry(label='Shrink video', title='Shrink', entries=entries + [BackEntry()])

def remove_menu() -> SubMenuEntry:
    entries = [
        ActionEntry(label='Remove audio', operation=Operation(kind=OperationKind.REMOVE_AUDIO)),
        ActionEntry(label='Remove metadata', operation=Operation(kind=OperationKind.REMOVE_METADATA)),
        BackEntry(),
    ]
    return SubMenuEntry(label='Remove data', title='Remove data', entries=entries)

def main_menu() -> List[MenuEntry]:
    """Top-level menu in display order"""
    return [
        convert_menu(),
        resize_menu(OperationKind.RESIZE_WIDTH),
        resize_menu(OperationKind.RESIZE_HEIGHT),
        shrink_menu(),
        remove_menu(),
        InfoEntry(),
        ExitEntry(),
    ]
