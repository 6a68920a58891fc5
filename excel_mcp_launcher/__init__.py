"""
Excel MCP Server Launcher
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Runs the prebuilt excel-mcp-server binary that matches the host platform.
"""

__title__ = "excel_mcp_launcher"
__description__ = "Runs the prebuilt excel-mcp-server binary that matches the host platform."
__license__ = "MIT"
__version__ = "0.0.1"
