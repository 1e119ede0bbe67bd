"""
Pydantic models for operations, menus and session state
"""

from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field, validator
from enum import Enum


# Shrink divisors mapped to the percentage shown in the menu
SCALE_DIVISORS = {8: 25, 6: 33, 4: 50, 2: 100}
ENCODERS = ('libx264', 'libx265')


class OperationKind(Enum):
    CONVERT = "convert"
    REMOVE_AUDIO = "remove_audio"
    REMOVE_METADATA = "remove_metadata"
    RESIZE_WIDTH = "resize_width"
    RESIZE_HEIGHT = "resize_height"
    SHRINK = "shrink"


class Operation(BaseModel):
    """A single ffmpeg transformation and its parameters"""
    kind: OperationKind
    extension: Optional[str] = None
    size: Optional[int] = Field(default=None, gt=0)
    scale: Optional[int] = None
    crf: Optional[int] = Field(default=None, ge=0, le=51)
    encoder: Optional[str] = None

    @validator('extension')
    def validate_extension(cls, v):
        if v is not None and (not v or '.' in v):
            raise ValueError('Extension must be non-empty and given without a dot')
        return v

    @validator('scale')
    def validate_scale(cls, v):
        if v is not None and v not in SCALE_DIVISORS:
            raise ValueError(f'Scale must be one of: {", ".join(map(str, SCALE_DIVISORS))}')
        return v

    @validator('encoder')
    def validate_encoder(cls, v):
        if v is not None and v not in ENCODERS:
            raise ValueError(f'Encoder must be one of: {", ".join(ENCODERS)}')
        return v

    @property
    def is_resize(self) -> bool:
        return self.kind in (OperationKind.RESIZE_WIDTH, OperationKind.RESIZE_HEIGHT)

    @property
    def needs_size(self) -> bool:
        """Resize without a fixed size asks the user for one"""
        return self.is_resize and self.size is None

    def with_size(self, size: int) -> 'Operation':
        return Operation(kind=self.kind, size=size)


class ActionEntry(BaseModel):
    """Leaf menu choice bound to an operation"""
    label: str
    operation: Operation
    size_prompt: Optional[str] = None


class BackEntry(BaseModel):
    label: str = 'Back'


class InfoEntry(BaseModel):
    label: str = 'File info'


class ExitEntry(BaseModel):
    label: str = 'Exit'


class SubMenuEntry(BaseModel):
    """Named reference to a sub-menu; title is formatted with the target"""
    label: str
    title: str
    entries: List[Union[ActionEntry, BackEntry]]

    def format_title(self, target: Path) -> str:
        return f"{self.title} {target}"


MenuEntry = Union[SubMenuEntry, ActionEntry, InfoEntry, ExitEntry, BackEntry]


class SessionState(BaseModel):
    """Loop-local session state"""
    target: Path
    last_output: Optional[Path] = None


class ToolPaths(BaseModel):
    """Executables used for every external invocation"""
    ffmpeg: str
    ffprobe: str
    ffplay: str


class AppConfig(BaseModel):
    """Configuration resolved from the command line"""
    start_path: Path
    dir_mode: bool = False
    use_system: bool = False
    debug: bool = False
    bin_dir: Path

    @validator('start_path')
    def validate_start_path(cls, v):
        if not v.is_absolute():
            raise ValueError('Start path must be absolute')
        return v
