"""MCP server exposing the Harvest time tracking API as tools."""

__version__ = "0.1.0"
