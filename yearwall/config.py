"""
Server configuration - loads from .env file
Values fall back to sensible defaults when the environment is empty
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# HTTP server
HOST = os.getenv("YEARWALL_HOST", "127.0.0.1")
PORT = int(os.getenv("YEARWALL_PORT", 8000))

# Fonts - optional TTF paths, system fonts are searched when unset
FONT_PATH = os.getenv("YEARWALL_FONT_PATH")
BOLD_FONT_PATH = os.getenv("YEARWALL_BOLD_FONT_PATH")

# Logging
SILENT = os.getenv("YEARWALL_SILENT", "0").lower() in ("1", "true", "yes")
