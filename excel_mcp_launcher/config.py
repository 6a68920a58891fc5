from types import MappingProxyType
from typing import Mapping
from .types import Platform, Architecture


binary_name = "excel-mcp-server"


binary_packages: Mapping[str, str] = MappingProxyType(
    {
        "win32_ia32": "excel-mcp-server_windows_386_sse2",
        "win32_x64": "excel-mcp-server_windows_amd64_v1",
        "win32_arm64": "excel-mcp-server_windows_arm64_v8.0",
        "darwin_x64": "excel-mcp-server_darwin_amd64_v1",
        "darwin_arm64": "excel-mcp-server_darwin_arm64_v8.0",
        "linux_ia32": "excel-mcp-server_linux_386_sse2",
        "linux_x64": "excel-mcp-server_linux_amd64_v1",
        "linux_arm64": "excel-mcp-server_linux_arm64_v8.0",
    }
)


def platform_key(os: Platform, arch: Architecture) -> str:
    return f"{os.value}_{arch.value}"


def binary_filename(os: Platform) -> str:
    suffix = ".exe" if os == Platform.WINDOWS else ""
    return f"{binary_name}{suffix}"


def supported_platforms() -> list[str]:
    return sorted(binary_packages)
