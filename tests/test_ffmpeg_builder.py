"""
Tests for ffmpeg/ffprobe command construction
"""

import pytest
from pathlib import Path
from pydantic import ValidationError

from ffmenu import Operation, OperationKind, build_ffmpeg_cmd, build_ffprobe_cmd
from ffmenu.ffmpeg_builder import format_cmd

INP = Path('/media/in put.mkv')
OUT = Path('/work/out.mp4')


class TestBuildFfmpegCmd:
    """One argument list per operation; no shell quoting involved"""

    def test_convert(self):
        op = Operation(kind=OperationKind.CONVERT, extension='mp4')
        assert build_ffmpeg_cmd('ffmpeg', INP, OUT, op) == ['ffmpeg', '-i', str(INP), str(OUT)]

    def test_remove_audio(self):
        op = Operation(kind=OperationKind.REMOVE_AUDIO)
        assert build_ffmpeg_cmd('ffmpeg', INP, OUT, op) == ['ffmpeg', '-i', str(INP), '-an', str(OUT)]

    def test_remove_metadata(self):
        op = Operation(kind=OperationKind.REMOVE_METADATA)
        cmd = build_ffmpeg_cmd('ffmpeg', INP, OUT, op)
        assert cmd == ['ffmpeg', '-i', str(INP), '-map_metadata', '-1', str(OUT)]

    def test_resize_width(self):
        op = Operation(kind=OperationKind.RESIZE_WIDTH, size=768)
        cmd = build_ffmpeg_cmd('ffmpeg', INP, OUT, op)
        assert cmd == ['ffmpeg', '-i', str(INP), '-vf', 'scale=768:-1', str(OUT)]

    def test_resize_height(self):
        op = Operation(kind=OperationKind.RESIZE_HEIGHT, size=192)
        cmd = build_ffmpeg_cmd('ffmpeg', INP, OUT, op)
        assert cmd == ['ffmpeg', '-i', str(INP), '-vf', 'scale=-1:192', str(OUT)]

    def test_shrink(self):
        op = Operation(kind=OperationKind.SHRINK, scale=6, crf=18, encoder='libx265')
        cmd = build_ffmpeg_cmd('/opt/bin/ffmpeg.exe', INP, OUT, op)
        assert cmd == [
            '/opt/bin/ffmpeg.exe', '-i', str(INP),
            '-vf', 'scale=trunc(iw/6)*2:trunc(ih/6)*2',
            '-c:v', 'libx265', '-crf', '18',
            str(OUT)
        ]

    def test_ffprobe(self):
        assert build_ffprobe_cmd('ffprobe', INP) == ['ffprobe', str(INP)]

    def test_format_cmd_quotes_spaces(self):
        assert format_cmd(['ffmpeg', '-i', '/a b.mkv', 'out.mp4']) == 'ffmpeg -i "/a b.mkv" out.mp4'


class TestOperationValidation:
    """Operation parameters are validated on construction"""

    @pytest.mark.parametrize("kwargs", [
        {'kind': OperationKind.SHRINK, 'scale': 3, 'crf': 23, 'encoder': 'libx264'},
        {'kind': OperationKind.SHRINK, 'scale': 4, 'crf': 52, 'encoder': 'libx264'},
        {'kind': OperationKind.SHRINK, 'scale': 4, 'crf': 23, 'encoder': 'libvpx'},
        {'kind': OperationKind.RESIZE_WIDTH, 'size': 0},
        {'kind': OperationKind.CONVERT, 'extension': '.mp4'},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValidationError):
            Operation(**kwargs)

    def test_custom_resize_needs_size(self):
        op = Operation(kind=OperationKind.RESIZE_HEIGHT)
        assert op.needs_size
        sized = op.with_size(300)
        assert not sized.needs_size
        assert sized.kind == OperationKind.RESIZE_HEIGHT
        assert sized.size == 300
