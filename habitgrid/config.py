# habitgrid/config.py

import os

from dotenv import load_dotenv

load_dotenv()

# --- Database ---
DATABASE_URL = os.getenv("HABITGRID_DATABASE_URL", "sqlite:///./habitgrid.db")

# --- Streaks / contribution grid ---
STREAK_RECORD_LIMIT = int(os.getenv("HABITGRID_STREAK_RECORD_LIMIT", 100))
CONTRIBUTION_DAYS = int(os.getenv("HABITGRID_CONTRIBUTION_DAYS", 365))
MAX_CONTRIBUTION_DAYS = int(os.getenv("HABITGRID_MAX_CONTRIBUTION_DAYS", 3660))

# --- Server ---
LOG_LEVEL = os.getenv("HABITGRID_LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HABITGRID_HOST", "127.0.0.1")
PORT = int(os.getenv("HABITGRID_PORT", 8080))
