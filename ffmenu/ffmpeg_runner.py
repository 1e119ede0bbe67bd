"""
External command execution with the terminal attached
"""

import logging
import signal
import subprocess
import sys

logger = logging.getLogger(__name__)

# Exit code reported when the executable could not be started
SPAWN_FAILED = 127

# Global process reference for signal handling
current_process = None

def signal_handler(signum, frame):
    """Terminate a running child process, then exit"""
    global current_process

    print(f"\n\nInterrupted (signal {signum})")

    if current_process and current_process.poll() is None:
        try:
            current_process.terminate()
            try:
                current_process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                current_process.kill()
                current_process.wait()
        except OSError as e:
            logger.debug("Could not stop child process: %s", e)

    sys.exit(130)

def setup_signal_handlers():
    """Set up signal handlers for Ctrl+C and termination"""
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

def run(cmd):
    """Run a command synchronously with inherited stdio and return its exit code.

    Failures are never raised: a non-zero exit code is returned as is and a
    spawn failure is reported as SPAWN_FAILED.
    """
    global current_process

    # Ensure command list contains strings for Windows compatibility
    cmd_str = [str(c) for c in cmd]
    logger.debug("Running: %s", cmd_str)

    try:
        p = subprocess.Popen(cmd_str)
    except OSError as e:
        logger.debug("Could not start %s: %s", cmd_str[0], e)
        return SPAWN_FAILED

    current_process = p
    try:
        returncode = p.wait()
    finally:
        current_process = None

    if returncode != 0:
        logger.debug("%s exited with code %d", cmd_str[0], returncode)
    return returncode
