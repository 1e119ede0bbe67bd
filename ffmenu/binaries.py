"""
Locating and downloading the ffmpeg executables
"""

import logging
import os
import shutil
import stat
import urllib.error
import urllib.request
from pathlib import Path

from .models import AppConfig, ToolPaths
from .rich_console import rich_output

logger = logging.getLogger(__name__)

DOWNLOAD_BASE_URL = 'https://molto.cloud/ffmpeg'
TOOL_IDS = ('ffmpeg', 'ffprobe', 'ffplay')

# Bundled executables live next to the package
DEFAULT_BIN_DIR = Path(__file__).parent / 'bin'


class DownloadError(RuntimeError):
    """A bundled executable could not be fetched"""


def bundled_name(tool_id: str) -> str:
    return f"{tool_id}.exe"

def download_url(tool_id: str) -> str:
    return f"{DOWNLOAD_BASE_URL}/{bundled_name(tool_id)}"

def resolve_tools(config: AppConfig) -> ToolPaths:
    """Use PATH lookups with --system, bundled executables otherwise"""
    if config.use_system:
        return ToolPaths(**{tool_id: tool_id for tool_id in TOOL_IDS})
    return ToolPaths(**{tool_id: str(config.bin_dir / bundled_name(tool_id)) for tool_id in TOOL_IDS})

def download(tool_id: str, dest: Path, timeout: float = 60):
    """Download one executable to dest"""
    url = download_url(tool_id)
    rich_output.print_info(f"Downloading {tool_id}")
    partial = dest.with_name(dest.name + '.part')

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            if getattr(resp, 'status', 200) != 200:
                raise DownloadError(f"invalid link: {url} (HTTP {resp.status})")
            with open(partial, 'wb') as fh:
                shutil.copyfileobj(resp, fh)
        partial.replace(dest)
        if os.name != 'nt':
            dest.chmod(dest.stat().st_mode | stat.S_IEXEC)
    except (urllib.error.URLError, OSError) as e:
        if partial.is_file():
            partial.unlink()
        raise DownloadError(f"Download of {tool_id} failed: {e}") from e

    logger.debug("Downloaded %s to %s", url, dest)

def ensure_bundled(config: AppConfig, tools: ToolPaths):
    """Fetch bundled executables that are missing, in a fixed order"""
    if config.use_system:
        return
    for tool_id in TOOL_IDS:
        path = Path(getattr(tools, tool_id))
        if not path.exists():
            download(tool_id, path)
