"""
GHL Tool Router Configuration
=============================
Central configuration for the router, the catalogue client and logging.
"""

import os
from dataclasses import dataclass

# Tool budget handed to the LLM layer (OpenAI rejects more than 128 tools)
MAX_TOOLS = int(os.environ.get("GHL_MAX_TOOLS", "120"))

# Optional JSON file that replaces the built-in category table
CATEGORY_CONFIG_PATH = os.environ.get("GHL_CATEGORY_CONFIG", "")

# MCP server that serves the tool catalogue
MCP_URL = os.environ.get("GHL_MCP_URL", "http://127.0.0.1:8000")
MCP_TIMEOUT = float(os.environ.get("GHL_MCP_TIMEOUT", "30"))
MCP_RETRIES = int(os.environ.get("GHL_MCP_RETRIES", "3"))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


@dataclass
class Settings:
    """Snapshot of the environment-driven settings."""
    MAX_TOOLS: int = MAX_TOOLS
    CATEGORY_CONFIG_PATH: str = CATEGORY_CONFIG_PATH
    MCP_URL: str = MCP_URL
    MCP_TIMEOUT: float = MCP_TIMEOUT
    MCP_RETRIES: int = MCP_RETRIES
    LOG_LEVEL: str = LOG_LEVEL


settings = Settings()
