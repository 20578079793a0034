import os

# --- UI ---
PAGE_TITLE = "Submission Scanner"
PAGE_ICON = "🗂️"

# --- Preview defaults ---
DEFAULT_ROOT = os.getenv("SCAN_ROOT", "")
