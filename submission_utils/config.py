# submission_utils/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# --- File recognition ---
SOURCE_SUFFIX_REGEX = os.getenv("SOURCE_SUFFIX_REGEX", r".*\.(java|py|c|cpp|h|hpp|cs|js|ts)")
ARCHIVE_REGEX = os.getenv("ARCHIVE_REGEX", r".*\.zip")

# --- Traversal limits ---
MAX_DIRECTORY_DEPTH = int(os.getenv("MAX_DIRECTORY_DEPTH", "10"))
ARCHIVE_NESTING_DEPTH = int(os.getenv("ARCHIVE_NESTING_DEPTH", "5"))

# --- Defaults for the CLI / preview page ---
DEFAULT_STRUCTURE = os.getenv("DEFAULT_STRUCTURE", ".*/SUBMISSION")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
