# =============================================================
# config.py
# Environment configuration (.env supported)
# v1.0 | EFT 005 Codec
# =============================================================

import os

import pytz
from dotenv import load_dotenv

# =========================================================
# 🔧 Initialization
# =========================================================
load_dotenv()

BASE_DIR = os.getenv("BASE_DIR", os.getcwd())

INPUT_DIR  = os.getenv("EFT_INPUT_DIR", os.path.join(BASE_DIR, "input"))
OUTPUT_DIR = os.getenv("EFT_OUTPUT_DIR", os.path.join(BASE_DIR, "output"))
ERROR_DIR  = os.getenv("EFT_ERROR_DIR", os.path.join(BASE_DIR, "error"))
LOG_DIR    = os.getenv("EFT_LOG_DIR", os.path.join(BASE_DIR, "logs"))

LOG_LEVEL = os.getenv("EFT_LOG_LEVEL", "INFO").upper()
TIMEZONE  = pytz.timezone(os.getenv("EFT_TIMEZONE", "America/Toronto"))
PORT      = int(os.getenv("EFT_PORT", 10000))


def ensure_dirs():
    """Create the working directories if they do not exist yet."""
    for d in (INPUT_DIR, OUTPUT_DIR, ERROR_DIR, LOG_DIR):
        os.makedirs(d, exist_ok=True)
