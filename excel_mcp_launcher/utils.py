import signal as signals
import platform
import psutil
from typing import Optional, Any
from types import FrameType
from signal import Signals, SIGTERM, SIGINT
from .types import Platform, Architecture
from .logging import log


kill_timeout = 3


def get_os_and_arch() -> tuple[Platform, Architecture]:
    os = Platform.UNKNOWN
    arch = Architecture.UNKNOWN

    match platform.system():
        case "Linux":
            os = Platform.LINUX
        case "Windows":
            os = Platform.WINDOWS
        case "Darwin":
            os = Platform.MACOS
        case _:
            os = Platform.UNKNOWN

    match platform.machine().lower():
        case "x86_64" | "amd64" | "x64":
            arch = Architecture.X64
        case "i386" | "i486" | "i586" | "i686" | "x86":
            arch = Architecture.IA32
        case "arm64" | "aarch64" | "armv8":
            arch = Architecture.ARM64
        case _:
            arch = Architecture.UNKNOWN

    return os, arch


def host_key(os: Platform, arch: Architecture) -> str:
    """Platform key naming the host's own identifiers where the enums have none."""
    os_id = platform.system().lower() if os == Platform.UNKNOWN else os.value
    arch_id = platform.machine().lower() if arch == Architecture.UNKNOWN else arch.value
    return f"{os_id}_{arch_id}"


def signal_process(pid: int, signal: Signals = SIGTERM, ensure_death: bool = False) -> None:
    try:
        proc = psutil.Process(pid)
        log.debug(f"Sending {signal.name} to PID {pid}")
        if signal == SIGTERM:
            proc.terminate()
        else:
            proc.send_signal(signal)
    except psutil.NoSuchProcess:
        return

    if ensure_death:
        _, alive = psutil.wait_procs([proc], timeout=kill_timeout)
        for p in alive:
            log.debug(f"PID {p.pid} is still alive, sending SIGKILL")
            try:
                p.kill()
            except psutil.NoSuchProcess:
                pass


def forwarded_signals() -> list[Signals]:
    sigs = [SIGTERM]
    if hasattr(signals, "SIGHUP"):
        sigs.append(signals.SIGHUP)
    return sigs


class SignalForwarder:
    """Passes termination signals received by the launcher on to the server process.

    Signals arriving before the server has been started are held back and
    delivered by attach(). SIGINT is ignored, the terminal delivers it to the
    whole foreground process group.
    """

    def __init__(self) -> None:
        self.pid: Optional[int] = None
        self.pending: list[Signals] = []
        self.previous: dict[Signals, Any] = {}

    def install(self) -> None:
        for sig in forwarded_signals():
            self.previous[sig] = signals.signal(sig, self.handle)
        self.previous[SIGINT] = signals.signal(SIGINT, self.ignore)

    def restore(self) -> None:
        for sig, handler in self.previous.items():
            signals.signal(sig, handler)
        self.previous.clear()

    def attach(self, pid: int) -> None:
        self.pid = pid
        while self.pending:
            signal_process(pid, self.pending.pop(0))

    def handle(self, sig: int, frame: Optional[FrameType]) -> None:
        if self.pid is None:
            self.pending.append(Signals(sig))
            return
        signal_process(self.pid, Signals(sig))

    def ignore(self, sig: int, frame: Optional[FrameType]) -> None:
        log.debug(f"Ignoring {Signals(sig).name}, the server receives it from the terminal")
