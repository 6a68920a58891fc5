import os
import sys
import subprocess
from signal import SIGTERM
from typing import Optional, Sequence
from .config import binary_packages, binary_filename, platform_key, supported_platforms
from .types import Platform, Architecture
from .utils import get_os_and_arch, host_key, signal_process, SignalForwarder
from .logging import log


class LauncherError(Exception):
    pass


class UnsupportedPlatform(LauncherError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Unsupported platform: {key}")
        self.key = key


class SpawnFailure(LauncherError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to execute {path}: {reason}")
        self.path = path


def launcher_dir() -> str:
    return os.path.dirname(os.path.abspath(__file__))


def resolve_binary_path(
    platform: Optional[Platform] = None, arch: Optional[Architecture] = None, base_dir: Optional[str] = None
) -> str:
    """Return the absolute path of the server binary for a platform.

    Defaults to the running host and to the directory this module is
    installed in. Raises UnsupportedPlatform if no package is built for
    the platform, naming the host's own identifiers when it was detected.
    The filesystem is not consulted.
    """
    detected = platform is None and arch is None
    if platform is None or arch is None:
        host_platform, host_arch = get_os_and_arch()
        platform = host_platform if platform is None else platform
        arch = host_arch if arch is None else arch
    if base_dir is None:
        base_dir = launcher_dir()

    key = platform_key(platform, arch)
    package = binary_packages.get(key)
    if package is None:
        if detected:
            key = host_key(platform, arch)
        log.debug(f"No package for {key}, supported: {', '.join(supported_platforms())}")
        raise UnsupportedPlatform(key)

    binary_path = os.path.abspath(os.path.join(base_dir, package, binary_filename(platform)))
    log.debug(f"Resolved {key} to {binary_path}")
    return binary_path


def exit_code(returncode: int) -> int:
    # POSIX reports death by signal N as -N
    if returncode < 0:
        return 128 - returncode
    return returncode


def run(binary_path: str, argv: Optional[Sequence[str]] = None) -> int:
    """Run the binary with our own arguments and stdio, wait for it and return its exit code."""
    if argv is None:
        argv = sys.argv
    args = [binary_path, *argv[1:]]

    log.debug(f"Executing {args}")
    forwarder = SignalForwarder()
    forwarder.install()
    try:
        try:
            proc = subprocess.Popen(args)
        except OSError as e:
            raise SpawnFailure(binary_path, e.strerror or str(e)) from e
        forwarder.attach(proc.pid)
        try:
            returncode = proc.wait()
        except BaseException:
            signal_process(proc.pid, SIGTERM, ensure_death=True)
            raise
    finally:
        forwarder.restore()

    log.debug(f"{binary_path} exited with {returncode}")
    return exit_code(returncode)
