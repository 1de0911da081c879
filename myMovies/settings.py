from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (file is optional)
load_dotenv(BASE_DIR / "settings.env")

APP_NAME    = "My Movies"
APP_VERSION = "1.0.0"

# File / folder paths
DATA_DIR = Path(os.getenv("MY_MOVIES_DATA_DIR") or Path.cwd())
LOG_PATH = Path(os.getenv("MY_MOVIES_LOG_PATH") or DATA_DIR / "log.txt")
DEBUG    = os.getenv("MY_MOVIES_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}

# Flat-file format
MOVIES_FILE_PREFIX = "movie_list_for_"
MOVIES_FILE_SUFFIX = ".txt"
DELIMITER          = "|"
NULL_TOKEN         = "NULL"
DATE_FORMAT        = "%Y-%m-%d"

# Login
MAX_LOGIN_ATTEMPTS = 3

# UI constants
ACCENT_COLOR = "#3b82f6"
