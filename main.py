#!/usr/bin/env python3
"""
Interactive ffmpeg menu

Pick a media file and apply one of a fixed set of ffmpeg operations:
- Convert to JPG / PNG / MP4
- Resize images to a fixed width or height (aspect preserved)
- Shrink videos with libx264/libx265 at a chosen scale and quality
- Remove audio or metadata
- Show ffprobe file info

Outputs are written to the current working directory, and each output
can become the input of the next operation.

Usage:
  python main.py                      # browse from the current directory
  python main.py /path/to/folder
  python main.py /path/to/file.mkv --system

Requires: ffmpeg, ffprobe in PATH with --system; otherwise the bundled
executables are downloaded on first run.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from ffmenu.models import AppConfig
from ffmenu.ffmpeg_runner import setup_signal_handlers
from ffmenu.binaries import resolve_tools, ensure_bundled, DownloadError, DEFAULT_BIN_DIR
from ffmenu.rich_console import rich_output, console
from ffmenu.session import Session

def parse_arguments(argv=None):
    """Parse command line arguments"""
    ap = argparse.ArgumentParser(description='Interactive menu for common ffmpeg operations')
    ap.add_argument('path', type=Path, nargs='?', default=None,
                    help='File or directory to start from (default: current directory)')
    ap.add_argument('--system', '-s', action='store_true',
                    help='Use ffmpeg/ffprobe/ffplay from PATH instead of the bundled executables')
    ap.add_argument('--debug', action='store_true', help='Show ffmpeg commands and debug logging')
    return ap.parse_args(argv)

def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False)]
    )

def build_config(args) -> AppConfig:
    """Resolve the start path; exits with -1 when it does not exist"""
    start = args.path.resolve() if args.path else Path.cwd()
    if not start.exists():
        print('File not found!', file=sys.stderr)
        sys.exit(-1)

    return AppConfig(
        start_path=start,
        dir_mode=start.is_dir(),
        use_system=args.system,
        debug=args.debug,
        bin_dir=DEFAULT_BIN_DIR
    )

def main(argv=None):
    setup_signal_handlers()

    args = parse_arguments(argv)
    setup_logging(args.debug)
    config = build_config(args)

    tools = resolve_tools(config)
    try:
        ensure_bundled(config, tools)
    except DownloadError as e:
        rich_output.print_error('Could not download ffmpeg executables', str(e))
        sys.exit(1)

    Session(config, tools).run()

if __name__ == '__main__':
    main()
