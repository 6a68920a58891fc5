from enum import Enum


class Platform(Enum):
    LINUX = "linux"
    WINDOWS = "win32"
    MACOS = "darwin"
    UNKNOWN = "unknown"


class Architecture(Enum):
    IA32 = "ia32"
    X64 = "x64"
    ARM64 = "arm64"
    UNKNOWN = "unknown"
