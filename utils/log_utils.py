import os
import csv
import logging
from datetime import datetime

import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FIELDS = ["timestamp", "file", "mode", "footer_total", "processed_total", "status", "detail"]


def configure_logging(level=None):
    """Root logger setup for the CLI and the web app. The codec itself never configures handlers."""
    logging.basicConfig(level=level or config.LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("werkzeug").setLevel(logging.ERROR)


def log_path():
    return os.path.join(config.LOG_DIR, "operations.csv")


def log_result(file, mode, footer_total, processed_total, status, detail=""):
    """Append one row to the CSV operations log."""
    path = log_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    row = {
        "timestamp": datetime.now(config.TIMEZONE).strftime("%Y-%m-%d %H:%M:%S"),
        "file": file,
        "mode": mode,
        "footer_total": footer_total,
        "processed_total": processed_total,
        "status": status,
        "detail": detail,
    }

    new = not os.path.exists(path)
    with open(path, "a", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=LOG_FIELDS)
        if new:
            writer.writeheader()
        writer.writerow(row)


def read_log(limit=None):
    path = log_path()
    if not os.path.exists(path):
        return []
    with open(path, newline="", encoding="utf-8") as csvfile:
        rows = list(csv.DictReader(csvfile))
    return rows[-limit:] if limit else rows
